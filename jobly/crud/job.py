"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs and their technology links, providing a clean interface for the API layer.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from jobly.core.database import run_sql
from jobly.core.exceptions import NotFoundError
from jobly.core.logging_config import get_logger
from jobly.crud import association
from jobly.crud import company as company_crud
from jobly.crud import technology as technology_crud
from jobly.helpers.sql import sql_for_partial_update
from jobly.models.job import Job
from jobly.schemas.job import JobNewRequest

logger = get_logger(__name__)

# API field name -> column name, for partial updates
JS_TO_SQL = {
    "companyHandle": "company_handle",
}

TECHNOLOGY_LINK_TABLE = "job_technologies"
TECHNOLOGY_LINK_COLS = ("job_id", "tech_id")


def create(db: Session, job_data: JobNewRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        NotFoundError: If the owning company does not exist
    """
    company_crud.get(db, job_data.company_handle)

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    logger.info(f"Created job {db_job.id}: {db_job.title} at {db_job.company_handle}")
    return db_job


def find_all(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
) -> List[Job]:
    """
    Retrieve jobs ordered by title, with optional filters.

    Args:
        db: Database session
        title: Case-insensitive substring of the job title
        min_salary: Keep jobs paying at least this much
        has_equity: When True, keep only jobs offering non-zero equity

    Returns:
        List of Job instances
    """
    query = db.query(Job)

    if title:
        query = query.filter(Job.title.icontains(title, autoescape=True))
    if min_salary is not None:
        query = query.filter(Job.salary >= min_salary)
    if has_equity:
        query = query.filter(Job.equity > 0)

    return query.order_by(Job.title, Job.id).all()


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has this id
    """
    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    return job


def update(db: Session, job_id: int, data: Dict[str, Any]) -> Job:
    """
    Partially update a job.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Wire-format fields to change, e.g. {"salary": ..., "companyHandle": ...}

    Raises:
        BadRequestError: If data is empty
        NotFoundError: If the job, or a newly referenced company, does not exist
    """
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)

    if "companyHandle" in data:
        company_crud.get(db, data["companyHandle"])

    id_idx = len(values) + 1
    result = run_sql(db, f"UPDATE jobs SET {set_cols} WHERE id = ${id_idx}", [*values, job_id])

    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {sorted(data)}")
    return get(db, job_id)


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID, along with its applications and technology links.

    Raises:
        NotFoundError: If no job has this id
    """
    job = get(db, job_id)
    db.delete(job)
    db.commit()
    logger.info(f"Deleted job {job_id}")


def add_technology(db: Session, job_id: int, tech_id: int) -> None:
    """
    Associate a job with a technology.

    Raises:
        NotFoundError: If the job or technology is not found
        BadRequestError: If already associated
    """
    get(db, job_id)
    technology_crud.get(db, tech_id)

    association.link(
        db,
        TECHNOLOGY_LINK_TABLE,
        TECHNOLOGY_LINK_COLS,
        (job_id, tech_id),
        f"Job {job_id} is already associated with technology {tech_id}",
        f"No job {job_id} or technology {tech_id}",
    )


def remove_technology(db: Session, job_id: int, tech_id: int) -> None:
    """
    Remove a job's association with a technology.

    Raises:
        NotFoundError: If the job is not associated with the technology
    """
    removed = association.unlink(db, TECHNOLOGY_LINK_TABLE, TECHNOLOGY_LINK_COLS, (job_id, tech_id))
    if not removed:
        raise NotFoundError(f"Job {job_id} is not associated with technology {tech_id}")
    logger.info(f"Removed technology {tech_id} from job {job_id}")
