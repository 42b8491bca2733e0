"""
Unit tests for the directory service layer.

Repository functions are replaced with AsyncMocks so the tests exercise
only validation ordering, failure translation and partial-update handling.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.core.errors import (
    OPERATION_MESSAGES,
    OperationFailure,
    RangeValidationError,
    RecordNotFoundError,
)
from app.core.observability import metrics
from app.domain.enums import StoreOperation
from app.domain.query import EmployeeListRequest, PageSpec
from app.services import directory_service


@pytest.fixture
def mock_db():
    db = MagicMock()
    db.commit = AsyncMock()
    return db


def failure_count(operation: StoreOperation) -> float:
    value = metrics.registry.get_sample_value(
        "store_operation_failures_total", {"operation": operation.value}
    )
    return value or 0.0


# (service call, repo function patched, operation)
OPERATION_CASES = [
    (
        lambda db: directory_service.list_organizations(db),
        "organization_repo.list_organizations",
        StoreOperation.FETCH_ORGANIZATIONS,
    ),
    (
        lambda db: directory_service.get_organization(db, 1),
        "organization_repo.get_organization",
        StoreOperation.FETCH_ORGANIZATION,
    ),
    (
        lambda db: directory_service.add_organization(db, "Acme"),
        "organization_repo.create_organization",
        StoreOperation.ADD_ORGANIZATION,
    ),
    (
        lambda db: directory_service.list_employees(db, EmployeeListRequest()),
        "employee_repo.list_employees",
        StoreOperation.FETCH_EMPLOYEES,
    ),
    (
        lambda db: directory_service.get_employee(db, 1),
        "employee_repo.get_employee",
        StoreOperation.FETCH_EMPLOYEE,
    ),
    (
        lambda db: directory_service.add_employee(db, {"first_name": "Ada"}),
        "employee_repo.create_employee",
        StoreOperation.ADD_EMPLOYEE,
    ),
    (
        lambda db: directory_service.update_employee(db, 1, {"salary": 1.0}),
        "employee_repo.update_employee",
        StoreOperation.UPDATE_EMPLOYEE,
    ),
    (
        lambda db: directory_service.delete_employee(db, 1),
        "employee_repo.delete_employee",
        StoreOperation.DELETE_EMPLOYEE,
    ),
]


class TestStoreFailureTranslation:
    """Every persistence failure surfaces as OperationFailure with a fixed message."""

    def test_every_operation_is_covered(self):
        assert {case[2] for case in OPERATION_CASES} == set(StoreOperation)

    @pytest.mark.anyio
    @pytest.mark.parametrize(("call", "target", "operation"), OPERATION_CASES)
    async def test_failure_maps_to_operation_message(self, mock_db, call, target, operation):
        cause = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch(f"app.services.directory_service.{target}", AsyncMock(side_effect=cause)):
            with pytest.raises(OperationFailure) as exc_info:
                await call(mock_db)

        error = exc_info.value
        assert error.operation == operation
        assert error.message == OPERATION_MESSAGES[operation]
        assert "connection refused" not in str(error)

    @pytest.mark.anyio
    async def test_cause_is_not_chained(self, mock_db):
        with patch(
            "app.services.directory_service.employee_repo.get_employee",
            AsyncMock(side_effect=SQLAlchemyError("boom")),
        ):
            with pytest.raises(OperationFailure) as exc_info:
                await directory_service.get_employee(mock_db, 7)

        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True

    @pytest.mark.anyio
    async def test_cause_is_logged(self, mock_db):
        with (
            patch(
                "app.services.directory_service.organization_repo.list_organizations",
                AsyncMock(side_effect=SQLAlchemyError("boom")),
            ),
            patch("app.services.directory_service.logger") as mock_logger,
        ):
            with pytest.raises(OperationFailure):
                await directory_service.list_organizations(mock_db)

        mock_logger.error.assert_called_once()
        _, kwargs = mock_logger.error.call_args
        assert kwargs["exc_info"] is True
        assert kwargs["extra"]["operation"] == "fetch_organizations"

    @pytest.mark.anyio
    async def test_failure_is_counted(self, mock_db):
        before = failure_count(StoreOperation.DELETE_EMPLOYEE)
        with patch(
            "app.services.directory_service.employee_repo.delete_employee",
            AsyncMock(side_effect=OSError("network unreachable")),
        ):
            with pytest.raises(OperationFailure):
                await directory_service.delete_employee(mock_db, 1)

        assert failure_count(StoreOperation.DELETE_EMPLOYEE) == before + 1

    @pytest.mark.anyio
    async def test_missing_record_on_update_is_operation_failure(self, mock_db):
        with patch(
            "app.services.directory_service.employee_repo.update_employee",
            AsyncMock(side_effect=RecordNotFoundError("Employee", 99)),
        ):
            with pytest.raises(OperationFailure) as exc_info:
                await directory_service.update_employee(mock_db, 99, {"salary": 1.0})

        assert exc_info.value.message == "Failed to update employee"

    @pytest.mark.anyio
    async def test_commit_failure_is_translated(self, mock_db):
        mock_db.commit.side_effect = SQLAlchemyError("commit failed")
        with patch(
            "app.services.directory_service.organization_repo.create_organization",
            AsyncMock(return_value=MagicMock()),
        ):
            with pytest.raises(OperationFailure) as exc_info:
                await directory_service.add_organization(mock_db, "Acme")

        assert exc_info.value.message == "Failed to add organization"

    @pytest.mark.anyio
    async def test_unrelated_errors_propagate(self, mock_db):
        with patch(
            "app.services.directory_service.employee_repo.get_employee",
            AsyncMock(side_effect=KeyError("bug")),
        ):
            with pytest.raises(KeyError):
                await directory_service.get_employee(mock_db, 1)


class TestListEmployees:
    @pytest.mark.anyio
    async def test_invalid_take_never_reaches_store(self, mock_db):
        list_mock = AsyncMock()
        with patch("app.services.directory_service.employee_repo.list_employees", list_mock):
            with pytest.raises(RangeValidationError) as exc_info:
                await directory_service.list_employees(
                    mock_db, EmployeeListRequest(page=PageSpec(take=100))
                )

        assert exc_info.value.value == 100
        list_mock.assert_not_awaited()

    @pytest.mark.anyio
    async def test_rows_returned_unmodified(self, mock_db):
        rows = [MagicMock(), MagicMock()]
        list_mock = AsyncMock(return_value=rows)
        with patch("app.services.directory_service.employee_repo.list_employees", list_mock):
            result = await directory_service.list_employees(mock_db, EmployeeListRequest())

        assert result is rows
        (_, query), _ = list_mock.call_args
        assert query.take == 30


class TestWrites:
    @pytest.mark.anyio
    async def test_add_employee_normalizes_dates(self, mock_db):
        create_mock = AsyncMock(return_value=MagicMock())
        with patch("app.services.directory_service.employee_repo.create_employee", create_mock):
            await directory_service.add_employee(
                mock_db,
                {
                    "first_name": "Ada",
                    "date_of_joining": "2021-03-04T00:00:00.000Z",
                    "date_of_birth": "1990-12-10",
                },
            )

        (_, data), _ = create_mock.call_args
        assert data["date_of_joining"] == date(2021, 3, 4)
        assert data["date_of_birth"] == date(1990, 12, 10)
        mock_db.commit.assert_awaited_once()

    @pytest.mark.anyio
    async def test_update_employee_drops_null_fields(self, mock_db):
        update_mock = AsyncMock(return_value=MagicMock())
        with patch("app.services.directory_service.employee_repo.update_employee", update_mock):
            await directory_service.update_employee(
                mock_db, 5, {"salary": 5000, "title": None, "date_of_birth": "1991-01-02"}
            )

        (_, employee_id, data), _ = update_mock.call_args
        assert employee_id == 5
        assert data == {"salary": 5000, "date_of_birth": date(1991, 1, 2)}
