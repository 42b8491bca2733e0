"""
Compose the WHERE clause for employee list queries.

Every sub-filter in a FilterSpec is optional. Each supplied one becomes a
clause; the clauses are joined with AND. With no clauses the result is
SQL ``true``, which matches every row.

Text filters are case-insensitive literal substring matches: ``%`` and
``_`` in the input match themselves, not LIKE wildcards.
"""

from sqlalchemy import ColumnElement, and_, true

from app.db.models import Employee
from app.domain.query import FilterSpec, SalaryRange


def title_clause(title: str | None) -> ColumnElement[bool] | None:
    if not title:
        return None
    return Employee.title.icontains(title, autoescape=True)


def department_clause(department: str | None) -> ColumnElement[bool] | None:
    if not department:
        return None
    return Employee.department.icontains(department, autoescape=True)


def salary_clause(salary_range: SalaryRange | None) -> ColumnElement[bool] | None:
    """
    Inclusive salary bounds.

    min > max is not rejected: both bounds are applied and nothing matches.
    """
    if salary_range is None or salary_range.is_empty():
        return None

    bounds = []
    if salary_range.min is not None:
        bounds.append(Employee.salary >= salary_range.min)
    if salary_range.max is not None:
        bounds.append(Employee.salary <= salary_range.max)
    return and_(*bounds)


def compose_employee_filter(filters: FilterSpec) -> ColumnElement[bool]:
    """
    Build a single predicate from the optional filters.

    Args:
        filters: Title, department and salary-range filters, each optional

    Returns:
        AND of the supplied clauses, or ``true()`` when none were supplied
    """
    clauses = [
        clause
        for clause in (
            title_clause(filters.title),
            department_clause(filters.department),
            salary_clause(filters.salary_range),
        )
        if clause is not None
    ]
    return and_(true(), *clauses)
