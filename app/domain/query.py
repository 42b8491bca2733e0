"""Filter, sort, and pagination specifications for employee list queries.

These types express query intent independent of the persistence layer.
app.services.employee_filters and app.services.employee_query translate
them into SQLAlchemy clauses.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.enums import EmployeeSortField, SortOrder

DEFAULT_TAKE = 30
MIN_TAKE = 1
MAX_TAKE = 50


@dataclass(frozen=True)
class SalaryRange:
    """Inclusive salary bounds; a missing bound is unbounded on that side."""

    min: float | None = None
    max: float | None = None

    def is_empty(self) -> bool:
        return self.min is None and self.max is None


@dataclass(frozen=True)
class FilterSpec:
    """Optional filters for the employee list. Absent filters match everything."""

    title: str | None = None
    department: str | None = None
    salary_range: SalaryRange | None = None


@dataclass(frozen=True)
class PageSpec:
    skip: int | None = None
    take: int | None = None


@dataclass(frozen=True)
class SortSpec:
    field: EmployeeSortField
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class EmployeeListRequest:
    """Everything a caller may supply when listing employees."""

    filters: FilterSpec = field(default_factory=FilterSpec)
    page: PageSpec = field(default_factory=PageSpec)
    sort: SortSpec | None = None
