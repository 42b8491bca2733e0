"""
FastAPI routes for Employee operations.

The list endpoint accepts optional filters, a page window and a sort
specification. `take` is deliberately not range-checked by FastAPI: the
service validates it and reports an out-of-range value with its bounds.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from app.api.schemas.employee import (
    EmployeeCreate,
    EmployeeDetailResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from app.core.dependencies import AsyncDbSession
from app.core.errors import NotFoundError
from app.db.models import Employee
from app.domain.enums import EmployeeSortField, SortOrder
from app.domain.query import (
    EmployeeListRequest,
    FilterSpec,
    PageSpec,
    SalaryRange,
    SortSpec,
)
from app.services import directory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])


def build_list_request(
    filter_title: str | None = None,
    filter_department: str | None = None,
    salary_min: float | None = None,
    salary_max: float | None = None,
    skip: int | None = None,
    take: int | None = None,
    sort_field: EmployeeSortField | None = None,
    sort_order: SortOrder = SortOrder.ASC,
) -> EmployeeListRequest:
    """Bundle flat query parameters into an EmployeeListRequest.

    sort_order without sort_field imposes no ordering.
    """
    salary_range = None
    if salary_min is not None or salary_max is not None:
        salary_range = SalaryRange(min=salary_min, max=salary_max)

    return EmployeeListRequest(
        filters=FilterSpec(
            title=filter_title,
            department=filter_department,
            salary_range=salary_range,
        ),
        page=PageSpec(skip=skip, take=take),
        sort=SortSpec(field=sort_field, order=sort_order) if sort_field else None,
    )


@router.get(
    "",
    response_model=list[EmployeeDetailResponse],
    summary="List employees",
    description="""
    Filter, sort and paginate employees. Every parameter is optional.

    **Filters (combined with AND):**
    - `filter_title`: case-insensitive substring of the title
    - `filter_department`: case-insensitive substring of the department
    - `salary_min` / `salary_max`: inclusive salary bounds

    **Pagination:**
    - `skip`: number of rows to skip
    - `take`: page size, 1-50 (default 30)

    **Sorting:**
    - `sort_field`: `dateOfJoining` or `salary`
    - `sort_order`: `asc` (default) or `desc`

    **Errors:**
    - 400 Bad Request: If `take` is outside 1-50
    - 500: "Failed to fetch employees" if the database fails
    """,
)
async def list_employees(
    db: AsyncDbSession,
    filter_title: Annotated[str | None, Query(description="Title substring")] = None,
    filter_department: Annotated[str | None, Query(description="Department substring")] = None,
    salary_min: Annotated[float | None, Query(description="Minimum salary (inclusive)")] = None,
    salary_max: Annotated[float | None, Query(description="Maximum salary (inclusive)")] = None,
    skip: Annotated[int | None, Query(description="Rows to skip")] = None,
    take: Annotated[int | None, Query(description="Page size (1-50, default 30)")] = None,
    sort_field: Annotated[EmployeeSortField | None, Query(description="Sort field")] = None,
    sort_order: Annotated[SortOrder, Query(description="Sort direction")] = SortOrder.ASC,
) -> list[Employee]:
    request = build_list_request(
        filter_title=filter_title,
        filter_department=filter_department,
        salary_min=salary_min,
        salary_max=salary_max,
        skip=skip,
        take=take,
        sort_field=sort_field,
        sort_order=sort_order,
    )
    employees = await directory_service.list_employees(db, request)

    logger.info(
        f"Listed {len(employees)} employees",
        extra={"count": len(employees)},
    )
    return employees


@router.get(
    "/{employee_id}",
    response_model=EmployeeDetailResponse,
    summary="Get an employee",
)
async def get_employee(
    employee_id: Annotated[int, Path(description="Employee identifier")],
    db: AsyncDbSession,
) -> Employee:
    employee = await directory_service.get_employee(db, employee_id)
    if employee is None:
        raise NotFoundError(
            f"Employee '{employee_id}' not found",
            details={"employee_id": employee_id},
        )
    return employee


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
)
async def add_employee(payload: EmployeeCreate, db: AsyncDbSession) -> Employee:
    return await directory_service.add_employee(db, payload.model_dump())


@router.patch(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update an employee",
    description="""
    Partially update an employee. Only the fields present in the body are
    changed; omitted fields keep their current values.

    **Errors:**
    - 500: "Failed to update employee" if the employee is missing or the database fails
    """,
)
async def update_employee(
    employee_id: Annotated[int, Path(description="Employee identifier")],
    payload: EmployeeUpdate,
    db: AsyncDbSession,
) -> Employee:
    return await directory_service.update_employee(
        db, employee_id, payload.model_dump(exclude_unset=True)
    )


@router.delete(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: Annotated[int, Path(description="Employee identifier")],
    db: AsyncDbSession,
) -> Employee:
    return await directory_service.delete_employee(db, employee_id)
