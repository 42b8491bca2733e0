"""
Pydantic schemas for API request/response validation.

This package contains schema definitions for different domain entities
used in API endpoints.
"""

# Re-export schemas for convenient imports.
from .employee import EmployeeCreate as EmployeeCreate
from .employee import EmployeeDetailResponse as EmployeeDetailResponse
from .employee import EmployeeResponse as EmployeeResponse
from .employee import EmployeeUpdate as EmployeeUpdate
from .organization import OrganizationCreate as OrganizationCreate
from .organization import OrganizationDetailResponse as OrganizationDetailResponse
from .organization import OrganizationResponse as OrganizationResponse
