"""
Error handling module for the DevCamper API.

Custom exceptions carry a message and an HTTP status code; the handlers turn
them into ``{"success": false, "error": message}`` responses.
"""

from devcamper.errors.exceptions import (
    AppError,
    BadRequestError,
    DBError,
    NotFoundError,
    ValidationError,
)
from devcamper.errors.handlers import register_exception_handlers
from devcamper.errors.manager import setup_errors

__all__ = [
    "setup_errors",
    "register_exception_handlers",
    "AppError",
    "BadRequestError",
    "DBError",
    "NotFoundError",
    "ValidationError",
]
