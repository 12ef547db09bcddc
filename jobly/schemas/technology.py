from pydantic import Field
from typing import List

from jobly.schemas.common import RequestModel, ResponseModel


class TechnologyNewRequest(RequestModel):
    """Schema for creating a technology"""
    name: str = Field(..., min_length=1, max_length=100)


class TechnologyResponse(ResponseModel):
    id: int
    name: str


class TechnologyEnvelope(ResponseModel):
    technology: TechnologyResponse


class TechnologyListResponse(ResponseModel):
    technologies: List[TechnologyResponse]
