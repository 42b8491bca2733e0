"""
Domain enums for the organization directory.

Values of the sort enums are the public names accepted by the API.
"""

from enum import Enum


class EmployeeSortField(str, Enum):
    """Fields the employee list may be ordered by."""

    DATE_OF_JOINING = "dateOfJoining"
    SALARY = "salary"


class SortOrder(str, Enum):
    """Direction of an ordering instruction."""

    ASC = "asc"
    DESC = "desc"


class StoreOperation(str, Enum):
    """
    Named operations delegated to the persistence layer.

    Each operation has exactly one user-facing failure message
    (see app.core.errors.OPERATION_MESSAGES).
    """

    FETCH_ORGANIZATIONS = "fetch_organizations"
    FETCH_ORGANIZATION = "fetch_organization"
    FETCH_EMPLOYEES = "fetch_employees"
    FETCH_EMPLOYEE = "fetch_employee"
    ADD_ORGANIZATION = "add_organization"
    ADD_EMPLOYEE = "add_employee"
    UPDATE_EMPLOYEE = "update_employee"
    DELETE_EMPLOYEE = "delete_employee"
