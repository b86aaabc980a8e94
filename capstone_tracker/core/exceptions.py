"""
Custom exceptions for the Capstone Tracker API.
Centralized error handling shared by services and controllers.
"""

from enum import Enum

from ninja import Schema


class ErrorSchema(Schema):
    """Standard error response schema."""

    code: str
    message: str
    details: dict | None = None


class APIException(Exception):
    """Base exception for API errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "An unexpected error occurred."

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message or self.__class__.message
        self.code = code or self.__class__.code
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> tuple[int, ErrorSchema]:
        """Convert exception to API response tuple."""
        return self.status_code, ErrorSchema(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# Resource Exceptions
class NotFoundError(APIException):
    """Resource not found."""

    status_code = 404
    code = "NOT_FOUND"
    message = "The requested resource was not found."


class ConflictError(APIException):
    """Operation conflicts with the current state (calendar, panel, schedule)."""

    status_code = 409
    code = "CONFLICT"
    message = "The operation conflicts with existing data."


# Validation Exceptions
class ValidationError(APIException):
    """Invalid input data."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Invalid data provided."


# Storage Exceptions
class StorageFailure(str, Enum):
    """Classification of persistence failures."""

    PERMISSION_DENIED = "permission-denied"
    UNAVAILABLE = "unavailable"
    PRECONDITION_FAILED = "failed-precondition"
    INVALID_ARGUMENT = "invalid-argument"
    UNKNOWN = "unknown"


STORAGE_MESSAGES = {
    StorageFailure.PERMISSION_DENIED: "You do not have permission to perform this action.",
    StorageFailure.UNAVAILABLE: "The project store is currently unavailable. Please try again later.",
    StorageFailure.PRECONDITION_FAILED: "Operation failed. Please try again.",
    StorageFailure.INVALID_ARGUMENT: "Invalid data provided. Please check your input.",
    StorageFailure.UNKNOWN: "An error occurred while processing your request.",
}

STORAGE_STATUS_CODES = {
    StorageFailure.PERMISSION_DENIED: 403,
    StorageFailure.PRECONDITION_FAILED: 409,
    StorageFailure.INVALID_ARGUMENT: 400,
}


class StorageError(APIException):
    """Underlying persistence failure."""

    status_code = 503
    code = "STORAGE_ERROR"

    def __init__(
        self,
        reason: StorageFailure = StorageFailure.UNKNOWN,
        details: dict | None = None,
    ):
        self.reason = reason
        self.status_code = STORAGE_STATUS_CODES.get(reason, 503)
        super().__init__(
            message=STORAGE_MESSAGES[reason],
            code=f"STORAGE_{reason.name}",
            details=details,
        )
