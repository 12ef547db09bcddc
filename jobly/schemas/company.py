from pydantic import Field, field_validator
from typing import List, Optional

from jobly.schemas.common import RequestModel, ResponseModel, reject_null

URL_PATTERN = r"^https?://\S+$"


class CompanyNewRequest(RequestModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=URL_PATTERN)


class CompanyUpdateRequest(RequestModel):
    """Schema for patching a company. Only the keys sent are updated."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=URL_PATTERN)

    not_null = field_validator("name", "description")(reject_null)


class CompanyResponse(ResponseModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(ResponseModel):
    """Job as listed inside a company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class CompanyDetail(CompanyResponse):
    jobs: List[CompanyJob] = []


class CompanyEnvelope(ResponseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(ResponseModel):
    company: CompanyDetail


class CompanyListResponse(ResponseModel):
    companies: List[CompanyResponse]
