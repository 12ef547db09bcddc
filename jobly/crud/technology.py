"""
CRUD operations for Technology model.
"""

from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.core.logging_config import get_logger
from jobly.models.technology import Technology
from jobly.schemas.technology import TechnologyNewRequest

logger = get_logger(__name__)


def create(db: Session, technology_data: TechnologyNewRequest) -> Technology:
    """
    Create a technology.

    Raises:
        BadRequestError: If a technology with this name exists
    """
    if db.query(Technology).filter(Technology.name == technology_data.name).first():
        raise BadRequestError(f"Duplicate technology: {technology_data.name}")

    db_technology = Technology(name=technology_data.name)
    db.add(db_technology)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Duplicate technology: {technology_data.name}") from exc
    db.refresh(db_technology)

    logger.info(f"Created technology {db_technology.id}: {db_technology.name}")
    return db_technology


def find_all(db: Session) -> List[Technology]:
    """List technologies ordered by name."""
    return db.query(Technology).order_by(Technology.name).all()


def get(db: Session, tech_id: int) -> Technology:
    """
    Raises:
        NotFoundError: If no technology has this id
    """
    technology = db.get(Technology, tech_id)
    if technology is None:
        raise NotFoundError(f"No technology with ID: {tech_id}")
    return technology


def remove(db: Session, tech_id: int) -> None:
    """
    Delete a technology and its job/user links.

    Raises:
        NotFoundError: If no technology has this id
    """
    technology = get(db, tech_id)
    db.delete(technology)
    db.commit()
    logger.info(f"Deleted technology {tech_id}")
