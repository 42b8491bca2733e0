"""
Pydantic schemas for Employee API operations.

These schemas define the request/response structure for the Employee
endpoints. Dates are exchanged as ISO 8601 calendar dates (YYYY-MM-DD);
full timestamps are accepted on input and truncated to their date.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.core.validators import normalize_date


class OrganizationSummary(BaseModel):
    """Organization attached to an employee record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class EmployeeBase(BaseModel):
    """Base schema with fields common to create and read operations."""

    first_name: str = Field(..., min_length=1, max_length=255, examples=["Ada"])
    last_name: str = Field(..., min_length=1, max_length=255, examples=["Lovelace"])
    date_of_joining: date = Field(..., examples=["2021-03-01"])
    date_of_birth: date = Field(..., examples=["1990-12-10"])
    salary: float = Field(..., ge=0, description="Annual salary", examples=[60000])
    title: str = Field(..., min_length=1, max_length=255, examples=["Software Engineer"])
    department: str = Field(..., min_length=1, max_length=255, examples=["Engineering"])
    organization_id: int = Field(..., description="Owning organization", examples=[1])


class EmployeeDateParsing(BaseModel):
    """Shared date parsing for request schemas carrying employee dates."""

    @field_validator("date_of_joining", "date_of_birth", mode="before", check_fields=False)
    @classmethod
    def parse_date(cls, v: object, info: ValidationInfo) -> object:
        """Accept ISO timestamps as well as plain dates."""
        if isinstance(v, str):
            return normalize_date(v, info.field_name)
        return v


class EmployeeCreate(EmployeeBase, EmployeeDateParsing):
    """Schema for creating a new Employee."""


class EmployeeUpdate(EmployeeDateParsing):
    """
    Schema for updating an existing Employee.

    All fields are optional to support partial updates.
    Fields that are omitted (or null) are left unchanged.
    """

    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    date_of_joining: date | None = None
    date_of_birth: date | None = None
    salary: float | None = Field(default=None, ge=0)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    department: str | None = Field(default=None, min_length=1, max_length=255)
    organization_id: int | None = None


class EmployeeResponse(EmployeeBase):
    """Employee without its organization."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    # Stored rows are returned as-is
    salary: float


class EmployeeDetailResponse(EmployeeResponse):
    """Employee with its organization attached."""

    organization: OrganizationSummary
