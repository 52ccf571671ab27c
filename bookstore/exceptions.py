"""
Custom exception classes for the application.

Each exception carries the HTTP status it maps to when it escapes to the
application-level exception handlers. Expected outcomes of the author
commands (not found, id mismatch) are returned as results, not raised;
these exceptions describe failures of the persistence layer and of request
validation.
"""

from bookstore.constants import ERROR_500_MESSAGE


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message (server side only for 5xx).
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    @property
    def client_message(self) -> str:
        """Message that is safe to send to the client."""
        if self.http_status >= 500:
            return ERROR_500_MESSAGE
        return self.message


class ValidationError(AppException):
    """
    Data validation failed.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class NotFoundError(AppException):
    """
    Resource not found.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class ConcurrencyConflictError(AppException):
    """
    The store rejected a write because the row changed or vanished since it
    was read (row version mismatch).

    HTTP Status: 409 Conflict. Author commands resolve it to 404 or 500.
    """

    http_status = 409


class StoreFailureError(AppException):
    """
    Any other persistence-layer fault, including connectivity.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
