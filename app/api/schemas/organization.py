"""
Pydantic schemas for Organization API operations.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.api.schemas.employee import EmployeeResponse


class OrganizationCreate(BaseModel):
    """Schema for creating a new Organization."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Organization name",
        examples=["Acme Corp"],
    )


class OrganizationResponse(BaseModel):
    """Organization without its employees."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class OrganizationDetailResponse(OrganizationResponse):
    """Organization with all of its employees."""

    employees: list[EmployeeResponse] = Field(default_factory=list)
