"""
CRUD operations for User model: authentication, registration, profile
updates, job applications and technology links.
"""

from typing import Any, Dict, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import run_sql
from jobly.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from jobly.core.logging_config import get_logger
from jobly.core.security import get_password_hash, verify_password
from jobly.crud import association
from jobly.crud import job as job_crud
from jobly.crud import technology as technology_crud
from jobly.helpers.sql import sql_for_partial_update
from jobly.models.user import User

logger = get_logger(__name__)

# API field name -> column name, for partial updates
JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

APPLICATION_TABLE = "applications"
APPLICATION_COLS = ("username", "job_id")

TECHNOLOGY_LINK_TABLE = "user_technologies"
TECHNOLOGY_LINK_COLS = ("user_username", "tech_id")


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user is not found or the password is wrong
    """
    user = db.get(User, username)
    if user is None or not verify_password(password, user.password):
        raise UnauthorizedError("Invalid username/password")
    return user


def register(
    db: Session,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False,
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Raises:
        BadRequestError: On duplicate username
    """
    if db.get(User, username) is not None:
        raise BadRequestError(f"Duplicate username: {username}")

    new_user = User(
        username=username,
        password=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        email=email,
        is_admin=is_admin,
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Duplicate username: {username}") from exc
    db.refresh(new_user)

    logger.info(f"Registered user {username} (admin: {is_admin})")
    return new_user


def find_all(db: Session) -> List[User]:
    """List users ordered by username."""
    return db.query(User).order_by(User.username).all()


def get(db: Session, username: str) -> User:
    """
    Retrieve a user. Applied job ids and technology ids are exposed as
    `user.applied_job_ids` and `user.technology_ids`.

    Raises:
        NotFoundError: If no user has this username
    """
    user = db.get(User, username)
    if user is None:
        raise NotFoundError(f"No user: {username}")
    return user


def update(db: Session, username: str, data: Dict[str, Any]) -> User:
    """
    Partially update a user.

    A supplied password is hashed before it is written.

    Raises:
        BadRequestError: If data is empty
        NotFoundError: If no user has this username
    """
    if "password" in data:
        data = {**data, "password": get_password_hash(data["password"])}

    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    username_idx = len(values) + 1

    result = run_sql(db, f"UPDATE users SET {set_cols} WHERE username = ${username_idx}", [*values, username])
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Updated user {username}: {sorted(data)}")
    return get(db, username)


def remove(db: Session, username: str) -> None:
    """
    Delete a user with their applications and technology links.

    Raises:
        NotFoundError: If no user has this username
    """
    user = get(db, username)
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {username}")


def apply_to_job(db: Session, username: str, job_id: int) -> None:
    """
    Apply for a job.

    Raises:
        NotFoundError: If the user or job is not found
        BadRequestError: If already applied
    """
    get(db, username)
    job_crud.get(db, job_id)

    association.link(
        db,
        APPLICATION_TABLE,
        APPLICATION_COLS,
        (username, job_id),
        f"User {username} already applied to job {job_id}",
        f"No user {username} or job {job_id}",
    )


def add_technology(db: Session, username: str, tech_id: int) -> None:
    """
    Associate a user with a technology.

    Raises:
        NotFoundError: If the user or technology is not found
        BadRequestError: If already associated
    """
    get(db, username)
    technology_crud.get(db, tech_id)

    association.link(
        db,
        TECHNOLOGY_LINK_TABLE,
        TECHNOLOGY_LINK_COLS,
        (username, tech_id),
        f"User {username} is already associated with technology {tech_id}",
        f"No user {username} or technology {tech_id}",
    )


def remove_technology(db: Session, username: str, tech_id: int) -> None:
    """
    Remove a user's association with a technology.

    Raises:
        NotFoundError: If the user is not associated with the technology
    """
    removed = association.unlink(db, TECHNOLOGY_LINK_TABLE, TECHNOLOGY_LINK_COLS, (username, tech_id))
    if not removed:
        raise NotFoundError(f"User {username} is not associated with technology {tech_id}")
    logger.info(f"Removed technology {tech_id} from user {username}")
