"""
FastAPI dependencies for authentication and authorization.

A missing or invalid bearer token makes the caller anonymous; only routes that
depend on ``require_admin`` turn that into an error.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import BaseModel

from jobly.errors import UnauthorizedError
from jobly.security import decode_token

logger = logging.getLogger(__name__)

# Authorization: Bearer <token>, optional on every route
bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Claims of an authenticated caller."""

    username: str
    is_admin: bool = False


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[CurrentUser]:
    """
    Extract the caller from the bearer token, if any.

    Returns:
        CurrentUser for a valid token, None for anonymous callers
    """
    if credentials is None:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as exc:
        logger.debug(f"Treating request with invalid token as anonymous: {exc}")
        return None

    username = payload.get("username")
    if not username:
        return None

    return CurrentUser(username=username, is_admin=payload.get("isAdmin") is True)


def require_admin(user: Optional[CurrentUser] = Depends(get_current_user)) -> CurrentUser:
    """
    Require an authenticated admin.

    Raises:
        UnauthorizedError: For anonymous and non-admin callers
    """
    if user is None or not user.is_admin:
        raise UnauthorizedError()
    return user
