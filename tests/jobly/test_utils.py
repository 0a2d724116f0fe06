"""Tests for utility functions."""

from jobly.utils.slug import create_slug


class TestSlugUtils:
    """Tests for slug generation utilities."""

    def test_create_slug_basic(self):
        """Test basic slug creation."""
        assert create_slug("Acme Corporation") == "acme-corporation"

    def test_create_slug_with_special_chars(self):
        """Test slug creation with special characters."""
        assert create_slug("AT&T Inc.") == "at-t-inc"
        assert create_slug("Google, LLC") == "google-llc"

    def test_create_slug_with_spaces(self):
        """Test slug creation with multiple spaces."""
        assert create_slug("Big   Tech   Company") == "big-tech-company"

    def test_create_slug_unicode(self):
        """Test slug creation with unicode characters."""
        assert create_slug("Café Résumé") == "cafe-resume"

    def test_create_slug_truncates_on_word_boundary(self):
        """Test max_length keeps whole words in their original order."""
        assert create_slug("Anderson, Arias and Morrow", max_length=12) == "anderson"
        assert create_slug("Anderson, Arias and Morrow", max_length=14) == "anderson-arias"

    def test_create_slug_no_limit_by_default(self):
        """Test the slug is untouched when max_length is 0."""
        assert create_slug("Anderson, Arias and Morrow") == "anderson-arias-and-morrow"
