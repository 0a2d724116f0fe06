"""Slug generation utilities."""

from slugify import slugify


def create_slug(text: str, max_length: int = 0) -> str:
    """
    Create a URL-friendly slug from text.

    Args:
        text: The text to convert to a slug
        max_length: Truncate the slug to this many characters (0 means no limit)

    Returns:
        A lowercase, hyphenated slug

    Examples:
        >>> create_slug("Acme Corporation")
        'acme-corporation'
        >>> create_slug("Google LLC")
        'google-llc'
        >>> create_slug("Anderson, Arias and Morrow", max_length=12)
        'anderson'
    """
    return slugify(text, lowercase=True, separator="-", max_length=max_length, word_boundary=bool(max_length), save_order=True)
