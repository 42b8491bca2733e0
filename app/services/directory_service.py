"""
Service layer for the organization directory.

Every call into the repository layer runs inside store_operation(), which
turns any persistence failure into an OperationFailure with the fixed
message for that operation. The underlying exception is logged and counted,
never returned to the caller.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import OperationFailure, StoreError
from app.core.observability import store_metrics
from app.core.validators import normalize_date_fields
from app.db.models import Employee, Organization
from app.domain.enums import StoreOperation
from app.domain.query import EmployeeListRequest
from app.repos import employee_repo, organization_repo
from app.services.employee_query import build_employee_query

logger = logging.getLogger(__name__)

# OSError covers driver-level connection failures that escape SQLAlchemy's wrapping
STORE_FAILURES = (StoreError, SQLAlchemyError, OSError)


@contextmanager
def store_operation(operation: StoreOperation) -> Iterator[None]:
    """
    Run one persistence operation, translating failures to OperationFailure.

    Args:
        operation: The named operation being performed

    Raises:
        OperationFailure: If the block raises any persistence failure
    """
    try:
        with store_metrics.track(operation.value):
            yield
    except STORE_FAILURES as exc:
        logger.error(
            f"Store operation failed: {operation.value}",
            exc_info=True,
            extra={"operation": operation.value, "error_type": type(exc).__name__},
        )
        store_metrics.record_failure(operation.value)
        raise OperationFailure(operation) from None


# ============================================================================
# Organizations
# ============================================================================


async def list_organizations(db: AsyncSession) -> list[Organization]:
    with store_operation(StoreOperation.FETCH_ORGANIZATIONS):
        return await organization_repo.list_organizations(db)


async def get_organization(db: AsyncSession, organization_id: int) -> Organization | None:
    with store_operation(StoreOperation.FETCH_ORGANIZATION):
        return await organization_repo.get_organization(db, organization_id)


async def add_organization(db: AsyncSession, name: str) -> Organization:
    with store_operation(StoreOperation.ADD_ORGANIZATION):
        organization = await organization_repo.create_organization(db, name)
        await db.commit()
    return organization


# ============================================================================
# Employees
# ============================================================================


async def list_employees(db: AsyncSession, request: EmployeeListRequest) -> list[Employee]:
    """
    List employees matching a filter/sort/page request.

    The request is validated and assembled before the store is called, so
    a RangeValidationError means no query was executed.

    Args:
        db: Database session
        request: Filters, page window and optional sort

    Returns:
        Matching employees with their organization loaded, unmodified

    Raises:
        RangeValidationError: If take lies outside [1, 50]
        OperationFailure: If the store fails ("Failed to fetch employees")
    """
    query = build_employee_query(request)
    with store_operation(StoreOperation.FETCH_EMPLOYEES):
        return await employee_repo.list_employees(db, query)


async def get_employee(db: AsyncSession, employee_id: int) -> Employee | None:
    with store_operation(StoreOperation.FETCH_EMPLOYEE):
        return await employee_repo.get_employee(db, employee_id)


async def add_employee(db: AsyncSession, fields: dict[str, Any]) -> Employee:
    """Create an employee; date fields are normalized to calendar dates first."""
    data = normalize_date_fields(fields)
    with store_operation(StoreOperation.ADD_EMPLOYEE):
        employee = await employee_repo.create_employee(db, data)
        await db.commit()
    return employee


async def update_employee(db: AsyncSession, employee_id: int, fields: dict[str, Any]) -> Employee:
    """
    Apply a partial update.

    Only keys present in fields with a non-null value are applied; every
    other column keeps its current value. Supplied date fields are
    normalized to calendar dates.

    Raises:
        OperationFailure: If the employee is missing or the store fails
            ("Failed to update employee")
    """
    data = normalize_date_fields({k: v for k, v in fields.items() if v is not None})
    with store_operation(StoreOperation.UPDATE_EMPLOYEE):
        employee = await employee_repo.update_employee(db, employee_id, data)
        await db.commit()
    return employee


async def delete_employee(db: AsyncSession, employee_id: int) -> Employee:
    with store_operation(StoreOperation.DELETE_EMPLOYEE):
        employee = await employee_repo.delete_employee(db, employee_id)
        await db.commit()
    return employee
