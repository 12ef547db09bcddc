"""
Routes for users.

POST /users is not the registration endpoint (see /auth/register): it lets
admins add users, who may themselves be admins. Reads and changes to a single
user are open to that user or to an admin.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import get_admin_user, get_correct_user_or_admin
from jobly.core.exceptions import BadRequestError
from jobly.core.security import create_token, generate_password
from jobly.crud import user as user_crud
from jobly.schemas.auth import CurrentUser
from jobly.schemas.user import (
    UserNewRequest,
    UserUpdateRequest,
    UserResponse,
    UserDetail,
    UserEnvelope,
    UserDetailEnvelope,
    UserCreatedResponse,
    UserListResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=UserCreatedResponse)
def create_user(
    request: UserNewRequest,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Add a user and return it with a token for them:
    { user: { username, firstName, lastName, email, isAdmin }, token }

    A random password is generated when none is given.

    Authorization required: login, admin
    """
    password = request.password or generate_password()
    user = user_crud.register(db, **request.model_dump(exclude={"password"}), password=password)
    logger.info(f"Admin {admin_user.username} created user {user.username}")
    return UserCreatedResponse(user=UserResponse.model_validate(user), token=create_token(user))


@router.get("", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """Authorization required: login, admin"""
    users = user_crud.find_all(db)
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_correct_user_or_admin),
):
    """
    User is { username, firstName, lastName, email, isAdmin, jobs, technologies }
    where jobs and technologies are lists of ids.

    Authorization required: admin or same user
    """
    user = user_crud.get(db, username)
    return UserDetailEnvelope(user=UserDetail.model_validate(user))


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_correct_user_or_admin),
):
    """
    Data can include: { firstName, lastName, password, email, isAdmin }
    Only admins may change isAdmin.

    Authorization required: admin or same user
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    if "isAdmin" in data and not current_user.is_admin:
        raise BadRequestError("Admin privileges required")

    user = user_crud.update(db, username, data)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete("/{username}")
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_correct_user_or_admin),
):
    """Authorization required: admin or same user"""
    user_crud.remove(db, username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}")
def apply_to_job(
    username: str,
    job_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_correct_user_or_admin),
):
    """
    Apply for a job. => { applied: jobId }

    Authorization required: admin or same user
    """
    user_crud.apply_to_job(db, username, job_id)
    return {"applied": job_id}


@router.post("/{username}/technologies/{tech_id}")
def add_user_technology(
    username: str,
    tech_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_correct_user_or_admin),
):
    """
    Link a technology to a user. => { added: techId }

    Authorization required: admin or same user
    """
    user_crud.add_technology(db, username, tech_id)
    return {"added": tech_id}


@router.delete("/{username}/technologies/{tech_id}")
def remove_user_technology(
    username: str,
    tech_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_correct_user_or_admin),
):
    """
    Unlink a technology from a user. => { removed: techId }

    Authorization required: admin or same user
    """
    user_crud.remove_technology(db, username, tech_id)
    return {"removed": tech_id}
