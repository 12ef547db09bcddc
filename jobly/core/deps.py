"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context
from the bearer token. They raise typed Jobly errors, which the central
error handlers turn into 400/401 responses.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from jobly.core.exceptions import BadRequestError, UnauthorizedError
from jobly.core.security import decode_token
from jobly.schemas.auth import CurrentUser

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error=False so a missing header becomes our own 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[CurrentUser]:
    """
    Decode the bearer token if one was sent.

    Returns None if no token was provided or the token does not verify.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        return None

    username = payload.get("username") or payload.get("sub")
    if not username:
        return None
    return CurrentUser(username=username, is_admin=bool(payload.get("isAdmin", False)))


def get_current_user(
    user: Optional[CurrentUser] = Depends(get_optional_user),
) -> CurrentUser:
    """
    Require a valid session.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    if user is None:
        raise UnauthorizedError("Authentication required")
    return user


def get_admin_user(
    user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """
    Require a valid session with the admin claim.

    Raises:
        UnauthorizedError: If the token is missing or invalid
        BadRequestError: If the user is not an admin
    """
    if not user.is_admin:
        raise BadRequestError("Admin privileges required")
    return user


def get_correct_user_or_admin(
    username: str,
    user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """
    Require that the token belongs to the user named in the path, or to an admin.

    Raises:
        UnauthorizedError: If the token is missing, invalid, or for another user
    """
    if not (user.is_admin or user.username == username):
        raise UnauthorizedError("Must be an admin or the same user")
    return user
