"""
Authentication endpoints.

- POST /auth/token: Exchange username/password for a JWT
- POST /auth/register: Create a (non-admin) account and receive a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.security import create_token
from jobly.crud import user as user_crud
from jobly.schemas.auth import LoginRequest, TokenResponse
from jobly.schemas.user import UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate user and return a JWT.

    Invalid credentials return 401.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    logger.info(f"User logged in: {user.username}")
    return TokenResponse(token=create_token(user))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user account. Self-registered users are never admins.

    Returns a JWT for immediate login.
    """
    new_user = user_crud.register(db, **request.model_dump())
    return TokenResponse(token=create_token(new_user))
