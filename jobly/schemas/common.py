"""
Shared pydantic configuration.

The API speaks camelCase JSON (numEmployees, logoUrl, companyHandle, ...)
while Python attributes and columns stay snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Base for request bodies: camelCase keys, unknown keys rejected."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class ResponseModel(BaseModel):
    """Base for response bodies, built from ORM rows."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def reject_null(value):
    """Field validator body for update fields that must not be set to null."""
    if value is None:
        raise ValueError("may not be null")
    return value
