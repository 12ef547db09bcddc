import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import get_admin_user
from jobly.crud import job as job_crud
from jobly.schemas.auth import CurrentUser
from jobly.schemas.job import (
    JobNewRequest,
    JobUpdateRequest,
    JobResponse,
    JobDetail,
    JobEnvelope,
    JobDetailEnvelope,
    JobListResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobNewRequest,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Create a job posting.

    job should be { title, salary, equity, companyHandle }

    Authorization required: login, admin
    """
    job = job_crud.create(db, request)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    db: Session = Depends(get_db),
):
    """
    List jobs.

    Can filter on:
    - title (case-insensitive, partial match)
    - minSalary
    - hasEquity (true keeps only jobs with non-zero equity)

    Authorization required: none
    """
    jobs = job_crud.find_all(db, title=title, min_salary=min_salary, has_equity=has_equity)
    return JobListResponse(jobs=[JobResponse.model_validate(j) for j in jobs])


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Job is { id, title, salary, equity, company, technologies }

    Authorization required: none
    """
    job = job_crud.get(db, job_id)
    return JobDetailEnvelope(job=JobDetail.model_validate(job))


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Patch a job. Data can include: { title, salary, equity, companyHandle }

    Authorization required: login, admin
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    job = job_crud.update(db, job_id, data)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Delete a job by ID.

    Authorization required: login, admin
    """
    job_crud.remove(db, job_id)
    logger.info(f"Admin {admin_user.username} deleted job {job_id}")
    return {"deleted": job_id}


@router.post("/{job_id}/technologies/{tech_id}")
def add_job_technology(
    job_id: int,
    tech_id: int,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Link a technology to a job. => { applied: techId }

    Authorization required: login, admin
    """
    job_crud.add_technology(db, job_id, tech_id)
    return {"applied": tech_id}


@router.delete("/{job_id}/technologies/{tech_id}")
def remove_job_technology(
    job_id: int,
    tech_id: int,
    db: Session = Depends(get_db),
    admin_user: CurrentUser = Depends(get_admin_user),
):
    """
    Unlink a technology from a job. => { removed: techId }

    Authorization required: login, admin
    """
    job_crud.remove_technology(db, job_id, tech_id)
    return {"removed": tech_id}
