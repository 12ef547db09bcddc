"""
Pydantic schemas for users and their associations.
"""

from pydantic import EmailStr, Field, field_validator
from typing import List, Optional

from jobly.schemas.common import RequestModel, ResponseModel, reject_null


class UserRegisterRequest(RequestModel):
    """Request schema for self-registration (never admin)."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=72)  # bcrypt limit
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserNewRequest(RequestModel):
    """
    Request schema for admins adding a user.

    password may be omitted; a random one is generated.
    """
    username: str = Field(..., min_length=1, max_length=25)
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False


class UserUpdateRequest(RequestModel):
    """Schema for patching a user. Only the keys sent are updated."""
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    is_admin: Optional[bool] = None

    not_null = field_validator("password", "first_name", "last_name", "email", "is_admin")(reject_null)


class UserResponse(ResponseModel):
    """User profile response (no password)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetail(UserResponse):
    """User profile plus applied job ids and technology ids."""
    jobs: List[int] = Field(
        default_factory=list,
        validation_alias="applied_job_ids",
        serialization_alias="jobs",
    )
    technologies: List[int] = Field(
        default_factory=list,
        validation_alias="technology_ids",
        serialization_alias="technologies",
    )


class UserEnvelope(ResponseModel):
    user: UserResponse


class UserDetailEnvelope(ResponseModel):
    user: UserDetail


class UserCreatedResponse(ResponseModel):
    user: UserResponse
    token: str


class UserListResponse(ResponseModel):
    users: List[UserResponse]
