"""
Custom exception classes for the application.

Every application exception carries the HTTP status and the machine-readable
error code it maps to, so handlers can turn it into a response without a
lookup table.
"""

from typing import Any


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        details: Optional extra context included in the error envelope.
        http_status: HTTP status code for REST API responses.
        code: Machine-readable error code.
    """

    http_status: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
            details: Optional additional context.
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when input data fails validation checks before processing.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    code = "validation_error"


class AuthenticationError(AppException):
    """
    Access was denied by the access predicate.

    HTTP Status: 401 Unauthorized
    """

    http_status = 401
    code = "authentication_failed"


class NotFoundError(AppException):
    """
    Resource not found.

    HTTP Status: 404 Not Found
    """

    http_status = 404
    code = "not_found"


class ReferentialIntegrityError(AppException):
    """
    A row references another row that does not exist.

    Raised when the store rejects a book insert because its author is gone.

    HTTP Status: 409 Conflict
    """

    http_status = 409
    code = "referential_integrity"


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
    code = "database_error"


class UpstreamError(AppException):
    """
    A third-party API could not be reached or returned garbage.

    HTTP Status: 502 Bad Gateway
    """

    http_status = 502
    code = "upstream_error"
