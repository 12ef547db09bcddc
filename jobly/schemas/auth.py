"""
Pydantic schemas for login, registration tokens and the decoded session.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request schema for POST /auth/token."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str


class CurrentUser(BaseModel):
    """Claims taken from a verified bearer token."""
    username: str
    is_admin: bool = False
