"""
Validate list parameters and assemble the bounded employee query.

The assembled EmployeeQuery is handed to employee_repo.list_employees;
nothing here touches the database.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import ColumnElement

from app.core.errors import RangeValidationError
from app.db.models import Employee
from app.domain.enums import EmployeeSortField, SortOrder
from app.domain.query import (
    DEFAULT_TAKE,
    MAX_TAKE,
    MIN_TAKE,
    EmployeeListRequest,
    PageSpec,
    SortSpec,
)
from app.services.employee_filters import compose_employee_filter

# Closed mapping: only these columns can ever reach ORDER BY
SORT_COLUMNS = {
    EmployeeSortField.DATE_OF_JOINING: Employee.date_of_joining,
    EmployeeSortField.SALARY: Employee.salary,
}


@dataclass(frozen=True)
class EmployeeQuery:
    """A fully validated list query: filter, page window and ordering."""

    where: ColumnElement[bool]
    take: int
    skip: int | None = None
    order_by: tuple[ColumnElement, ...] = ()


def resolve_take(take: int | None) -> int:
    """
    Resolve the page size.

    Args:
        take: Requested page size, or None for the default

    Returns:
        The page size, DEFAULT_TAKE when not supplied

    Raises:
        RangeValidationError: If the page size lies outside [MIN_TAKE, MAX_TAKE]
    """
    value = DEFAULT_TAKE if take is None else take
    if value < MIN_TAKE or value > MAX_TAKE:
        raise RangeValidationError("take", value, MIN_TAKE, MAX_TAKE)
    return value


def resolve_ordering(sort: SortSpec | None) -> tuple[ColumnElement, ...]:
    """Map a SortSpec to an ORDER BY instruction; no sort means no ordering."""
    if sort is None:
        return ()

    column = SORT_COLUMNS[EmployeeSortField(sort.field)]
    if SortOrder(sort.order) == SortOrder.DESC:
        return (column.desc(),)
    return (column.asc(),)


def resolve_page(page: PageSpec) -> tuple[int | None, int]:
    """Return (skip, take). skip is passed through as given."""
    return page.skip, resolve_take(page.take)


def build_employee_query(request: EmployeeListRequest) -> EmployeeQuery:
    """
    Assemble the bounded query for one list request.

    Validation runs before anything else is built, so an invalid page size
    never produces a query.
    """
    skip, take = resolve_page(request.page)
    return EmployeeQuery(
        where=compose_employee_filter(request.filters),
        take=take,
        skip=skip,
        order_by=resolve_ordering(request.sort),
    )
