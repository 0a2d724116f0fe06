"""
JWT helpers.

Tokens are HS256-signed with ``settings.secret_key`` and carry the claims
``{"username": ..., "isAdmin": ...}``.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt

from jobly.config import settings


def create_token(username: str, is_admin: bool = False, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT for a user.

    Args:
        username: Value of the ``username`` claim
        is_admin: Value of the ``isAdmin`` claim
        expires_delta: Token lifetime (default: ``settings.access_token_expire_minutes``)

    Returns:
        Encoded JWT as a string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    claims = {
        "username": username,
        "isAdmin": is_admin,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT.

    Raises:
        JWTError: If the token is malformed, badly signed or expired
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
