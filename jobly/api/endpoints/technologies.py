import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import get_admin_user
from jobly.crud import technology as technology_crud
from jobly.schemas.auth import CurrentUser
from jobly.schemas.technology import (
    TechnologyNewRequest,
    TechnologyResponse,
    TechnologyEnvelope,
    TechnologyListResponse,
)

router = APIRouter(prefix="/technologies", tags=["Technologies"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=TechnologyEnvelope)
def create_technology(
    request: TechnologyNewRequest,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """Authorization required: login, admin"""
    technology = technology_crud.create(db, request)
    return TechnologyEnvelope(technology=TechnologyResponse.model_validate(technology))


@router.get("", response_model=TechnologyListResponse)
def list_technologies(db: Session = Depends(get_db)):
    """Authorization required: none"""
    technologies = technology_crud.find_all(db)
    return TechnologyListResponse(technologies=[TechnologyResponse.model_validate(t) for t in technologies])


@router.get("/{tech_id}", response_model=TechnologyEnvelope)
def get_technology(tech_id: int, db: Session = Depends(get_db)):
    """Authorization required: none"""
    technology = technology_crud.get(db, tech_id)
    return TechnologyEnvelope(technology=TechnologyResponse.model_validate(technology))


@router.delete("/{tech_id}")
def delete_technology(
    tech_id: int,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Delete a technology; its job and user links go with it.

    Authorization required: login, admin
    """
    technology_crud.remove(db, tech_id)
    logger.info(f"Admin {admin_user.username} deleted technology {tech_id}")
    return {"deleted": tech_id}
