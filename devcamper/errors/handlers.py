"""
Exception handlers for the DevCamper API.

This module converts application, validation and framework exceptions into
the ``{"success": false, "error": ...}`` envelope.
"""

from functools import partial
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from devcamper.errors.exceptions import AppError
from devcamper.logging import Logger, ensure_logger
from devcamper.schemas import ErrorResponse


def create_error_response(status_code: int, message: str) -> JSONResponse:
    """
    Create a JSON error response.

    Args:
        status_code: HTTP status code
        message: Error message

    Returns:
        JSON response carrying the error envelope
    """
    response = ErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(response))


def _validation_messages(errors_data: List[Dict[str, Any]]) -> List[str]:
    """
    Flatten validation errors into ``field: message`` strings.

    Location segments such as ``body`` and ``query`` are dropped.
    """
    messages = []
    for error in errors_data:
        loc = [
            str(item)
            for item in error.get("loc", [])
            if item not in ("body", "query", "path")
        ]
        msg = error.get("msg", "Validation error")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages


async def app_error_handler(
    request: Request, exc: AppError, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Handler for AppError and its subclasses.
    """
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        log = ensure_logger(logger, __name__)
        log.error(f"{exc.__class__.__name__}: {exc.message} {exc.details}")
    return create_error_response(exc.status_code, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handler for FastAPI's RequestValidationError.
    """
    messages = _validation_messages(exc.errors())
    return create_error_response(
        status.HTTP_400_BAD_REQUEST, ", ".join(messages) or "Validation error"
    )


async def pydantic_validation_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """
    Handler for Pydantic's ValidationError.
    """
    messages = _validation_messages(exc.errors())
    return create_error_response(
        status.HTTP_400_BAD_REQUEST, ", ".join(messages) or "Validation error"
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handler for framework HTTP exceptions such as unknown routes.
    """
    return create_error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(
    request: Request, exc: Exception, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Generic handler for unhandled exceptions.
    """
    log = ensure_logger(logger, __name__)
    log.error(f"Unhandled exception: {exc}", exc_info=exc)
    return create_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Server Error"
    )


def register_exception_handlers(
    app: FastAPI, logger: Optional[Logger] = None
) -> None:
    """
    Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging exceptions
    """
    app.exception_handler(AppError)(partial(app_error_handler, logger=logger))
    app.exception_handler(RequestValidationError)(validation_exception_handler)
    app.exception_handler(PydanticValidationError)(pydantic_validation_handler)
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(Exception)(
        partial(unhandled_exception_handler, logger=logger)
    )
