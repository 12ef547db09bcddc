"""
Routes for companies.

Reads are public; creating, patching and deleting require an admin token.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import get_admin_user
from jobly.crud import company as company_crud
from jobly.schemas.auth import CurrentUser
from jobly.schemas.company import (
    CompanyNewRequest,
    CompanyUpdateRequest,
    CompanyResponse,
    CompanyDetail,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListResponse,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyNewRequest,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Create a company.

    company should be { handle, name, description, numEmployees, logoUrl }

    Authorization required: login, admin
    """
    company = company_crud.create(db, request)
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.get("", response_model=CompanyListResponse)
def list_companies(
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    name: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List companies.

    Can filter on provided search filters:
    - minEmployees
    - maxEmployees
    - name (case-insensitive, partial match)

    Authorization required: none
    """
    companies = company_crud.find_all(
        db,
        min_employees=min_employees,
        max_employees=max_employees,
        name=name,
    )
    return CompanyListResponse(companies=[CompanyResponse.model_validate(c) for c in companies])


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """
    Company is { handle, name, description, numEmployees, logoUrl, jobs }
    where jobs is [{ id, title, salary, equity }, ...]

    Authorization required: none
    """
    company = company_crud.get(db, handle)
    return CompanyDetailEnvelope(company=CompanyDetail.model_validate(company))


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Patch company data. Fields can be: { name, description, numEmployees, logoUrl }

    Authorization required: login, admin
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    company = company_crud.update(db, handle, data)
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.delete("/{handle}")
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Delete a company and its jobs.

    Authorization required: login, admin
    """
    company_crud.remove(db, handle)
    logger.info(f"Admin {admin_user.username} deleted company {handle}")
    return {"deleted": handle}
