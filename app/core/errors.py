"""
Domain-specific exceptions for the Organization Directory API.

DirectoryError subclasses are raised by the service layer and mapped
to HTTP status codes in the API layer. StoreError subclasses are raised
by the persistence layer and never reach API callers directly.
"""

from typing import Any

from app.domain.enums import StoreOperation


class DirectoryError(Exception):
    """Base exception for all directory domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RangeValidationError(DirectoryError):
    """
    Raised when a numeric request argument lies outside its allowed range.

    Examples:
    - take=0 or take=51 for the employee list

    HTTP Status: 400 Bad Request
    """

    def __init__(self, argument: str, value: int, minimum: int, maximum: int):
        self.argument = argument
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"'{argument}' argument value '{value}' is outside the valid range "
            f"of '{minimum}' to '{maximum}'.",
            details={"argument": argument, "value": value, "min": minimum, "max": maximum},
        )


class NotFoundError(DirectoryError):
    """
    Raised when a requested resource does not exist.

    Examples:
    - Employee ID not found
    - Organization ID not found

    HTTP Status: 404 Not Found
    """

    pass


# Fixed user-facing message per persistence operation
OPERATION_MESSAGES: dict[StoreOperation, str] = {
    StoreOperation.FETCH_ORGANIZATIONS: "Failed to fetch organizations",
    StoreOperation.FETCH_ORGANIZATION: "Failed to fetch organization",
    StoreOperation.FETCH_EMPLOYEES: "Failed to fetch employees",
    StoreOperation.FETCH_EMPLOYEE: "Failed to fetch employee",
    StoreOperation.ADD_ORGANIZATION: "Failed to add organization",
    StoreOperation.ADD_EMPLOYEE: "Failed to add employee",
    StoreOperation.UPDATE_EMPLOYEE: "Failed to update employee",
    StoreOperation.DELETE_EMPLOYEE: "Failed to delete employee",
}


class OperationFailure(DirectoryError):
    """
    Raised when the persistence layer fails during a named operation.

    The message is fixed per operation; the underlying cause is logged
    but never attached to the error.

    HTTP Status: 500 Internal Server Error
    """

    def __init__(self, operation: StoreOperation):
        self.operation = operation
        super().__init__(
            OPERATION_MESSAGES[operation],
            details={"operation": operation.value},
        )


class StoreError(Exception):
    """Base exception for failures raised by the persistence layer."""

    pass


class RecordNotFoundError(StoreError):
    """Raised by the persistence layer when a keyed write targets a missing row."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} does not exist")


# HTTP Status Code Mapping
ERROR_STATUS_MAP = {
    RangeValidationError: 400,
    NotFoundError: 404,
    OperationFailure: 500,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)
