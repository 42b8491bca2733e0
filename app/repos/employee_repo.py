"""
Repository layer for Employee data access.

Provides database operations following the repository pattern to separate
data access logic from the service layer. Functions here raise SQLAlchemy
errors or StoreError subclasses; translating them for callers is the
service layer's job.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.errors import RecordNotFoundError
from app.db.models import Employee
from app.services.employee_query import EmployeeQuery

logger = logging.getLogger(__name__)

# Columns callers may write; id is assigned by the database
WRITABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "date_of_joining",
        "date_of_birth",
        "salary",
        "title",
        "department",
        "organization_id",
    }
)


async def list_employees(db: AsyncSession, query: EmployeeQuery) -> list[Employee]:
    """
    Execute an assembled employee list query.

    Args:
        db: Database session
        query: Assembled, validated list query

    Returns:
        Matching employees with their organization loaded
    """
    stmt = (
        select(Employee)
        .options(selectinload(Employee.organization))
        .where(query.where)
        .limit(query.take)
    )
    if query.skip is not None:
        stmt = stmt.offset(query.skip)
    if query.order_by:
        stmt = stmt.order_by(*query.order_by)

    result = await db.execute(stmt)
    employees = list(result.scalars().all())

    logger.debug(
        f"Retrieved {len(employees)} employees",
        extra={"count": len(employees), "skip": query.skip, "take": query.take},
    )
    return employees


async def get_employee(db: AsyncSession, employee_id: int) -> Employee | None:
    """
    Retrieve a single employee by ID.

    Args:
        db: Database session
        employee_id: Employee identifier

    Returns:
        Employee with its organization loaded, or None if it does not exist
    """
    stmt = (
        select(Employee)
        .options(selectinload(Employee.organization))
        .where(Employee.id == employee_id)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def _get_for_write(db: AsyncSession, employee_id: int) -> Employee:
    employee = await db.get(Employee, employee_id)
    if employee is None:
        raise RecordNotFoundError("Employee", employee_id)
    return employee


async def create_employee(db: AsyncSession, fields: dict[str, Any]) -> Employee:
    """
    Insert a new employee.

    Args:
        db: Database session
        fields: Column values; unknown keys are ignored

    Returns:
        The created Employee with its id assigned
    """
    employee = Employee(**{k: v for k, v in fields.items() if k in WRITABLE_FIELDS})
    db.add(employee)
    await db.flush()

    logger.info(
        f"Created employee: id={employee.id}",
        extra={"employee_id": employee.id, "organization_id": employee.organization_id},
    )
    return employee


async def update_employee(db: AsyncSession, employee_id: int, fields: dict[str, Any]) -> Employee:
    """
    Update an existing employee (partial update).

    Only keys present in fields are written; everything else is unchanged.

    Args:
        db: Database session
        employee_id: Employee identifier
        fields: Column values to change

    Returns:
        Updated Employee

    Raises:
        RecordNotFoundError: If the employee does not exist
    """
    employee = await _get_for_write(db, employee_id)

    updates = {k: v for k, v in fields.items() if k in WRITABLE_FIELDS}
    for key, value in updates.items():
        setattr(employee, key, value)
    await db.flush()

    logger.info(
        f"Updated employee: id={employee_id}",
        extra={"employee_id": employee_id, "updated_fields": sorted(updates)},
    )
    return employee


async def delete_employee(db: AsyncSession, employee_id: int) -> Employee:
    """
    Delete an employee.

    Args:
        db: Database session
        employee_id: Employee identifier

    Returns:
        The deleted Employee as it was before deletion

    Raises:
        RecordNotFoundError: If the employee does not exist
    """
    employee = await _get_for_write(db, employee_id)

    await db.delete(employee)
    await db.flush()

    logger.info(f"Deleted employee: id={employee_id}", extra={"employee_id": employee_id})
    return employee
