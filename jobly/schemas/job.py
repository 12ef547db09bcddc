from pydantic import Field, field_validator
from typing import List, Optional

from jobly.schemas.common import RequestModel, ResponseModel, reject_null
from jobly.schemas.company import CompanyResponse


class JobNewRequest(RequestModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(RequestModel):
    """Schema for patching a job. Only the keys sent are updated."""
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: Optional[str] = Field(None, min_length=1, max_length=25)

    not_null = field_validator("title", "company_handle")(reject_null)


class JobResponse(ResponseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str


class JobDetail(ResponseModel):
    """Job with its company and linked technology ids"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company: CompanyResponse
    technologies: List[int] = Field(
        default_factory=list,
        validation_alias="technology_ids",
        serialization_alias="technologies",
    )


class JobEnvelope(ResponseModel):
    job: JobResponse


class JobDetailEnvelope(ResponseModel):
    job: JobDetail


class JobListResponse(ResponseModel):
    jobs: List[JobResponse]
