"""
CRUD operations for Company model.

Every function takes the database session explicitly, so the API layer
(or a test) decides which connection pool and transaction they run in.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import run_sql
from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.core.logging_config import get_logger
from jobly.helpers.sql import sql_for_partial_update
from jobly.models.company import Company
from jobly.schemas.company import CompanyNewRequest

logger = get_logger(__name__)

# API field name -> column name, for partial updates
JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyNewRequest) -> Company:
    """
    Create a company.

    Raises:
        BadRequestError: If the handle (or name) is already taken
    """
    if db.get(Company, company_data.handle) is not None:
        raise BadRequestError(f"Duplicate company: {company_data.handle}")

    db_company = Company(
        handle=company_data.handle,
        name=company_data.name,
        description=company_data.description,
        num_employees=company_data.num_employees,
        logo_url=company_data.logo_url,
    )

    db.add(db_company)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Duplicate company: {company_data.handle}") from exc
    db.refresh(db_company)

    logger.info(f"Created company {db_company.handle}")
    return db_company


def find_all(
    db: Session,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
    name: Optional[str] = None,
) -> List[Company]:
    """
    List companies ordered by name.

    Args:
        db: Database session
        min_employees: Keep companies with at least this many employees
        max_employees: Keep companies with at most this many employees
        name: Case-insensitive substring of the company name

    All supplied filters must match.

    Raises:
        BadRequestError: If min_employees > max_employees
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("Min employees cannot be greater than max")

    query = db.query(Company)

    if min_employees is not None:
        query = query.filter(Company.num_employees >= min_employees)
    if max_employees is not None:
        query = query.filter(Company.num_employees <= max_employees)
    if name:
        query = query.filter(Company.name.icontains(name, autoescape=True))

    return query.order_by(Company.name).all()


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company by handle. Its jobs are reachable via `company.jobs`.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = db.get(Company, handle)
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    return company


def update(db: Session, handle: str, data: Dict[str, Any]) -> Company:
    """
    Partially update a company.

    Args:
        db: Database session
        handle: Company to update
        data: Wire-format fields to change, e.g. {"name": ..., "numEmployees": ...}

    Raises:
        BadRequestError: If data is empty or the new name is taken
        NotFoundError: If no company has this handle
    """
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    handle_idx = len(values) + 1

    sql = f"UPDATE companies SET {set_cols} WHERE handle = ${handle_idx}"
    try:
        result = run_sql(db, sql, [*values, handle])
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}") from exc

    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Updated company {handle}: {sorted(data)}")
    return get(db, handle)


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, through the cascade, its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = get(db, handle)
    db.delete(company)
    db.commit()
    logger.info(f"Deleted company {handle}")
