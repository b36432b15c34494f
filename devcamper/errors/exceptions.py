"""
Base exception classes for the DevCamper API.

These exceptions are converted into ``(message, status code)`` error
responses by the registered exception handlers.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default: 500)
        details: Additional error details, logged but not returned to clients
    """

    def __init__(
        self,
        message: str = "Server Error",
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(AppError):
    """Exception raised for general client-side errors."""

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message, status_code=HTTPStatus.BAD_REQUEST, details=details
        )


class ValidationError(BadRequestError):
    """
    Exception raised when payload validation fails.

    The individual messages are joined into the response message.

    Attributes:
        messages: List of field-level validation messages
    """

    def __init__(
        self,
        messages: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.messages = messages or []
        super().__init__(
            message=", ".join(self.messages) or "Validation error", details=details
        )


class NotFoundError(AppError):
    """Exception raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if resource_type and resource_id is not None:
            message = f"{resource_type} not found with id of {resource_id}"
            details = details or {}
            details.update({"resource_type": resource_type, "resource_id": resource_id})

        super().__init__(
            message=message, status_code=HTTPStatus.NOT_FOUND, details=details
        )


class DBError(AppError):
    """
    Exception raised for database-related errors.
    """

    def __init__(
        self,
        message: str = "Database error",
        details: Optional[dict] = None,
    ):
        super().__init__(
            message=message,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details=details,
        )
