"""
Exception hierarchy for the app1 data API.

Handlers never fail on their own; the errors here cover the request
parsing layer in front of them. Each `AppError` carries the HTTP status
and a stable machine-readable error code, and `register_exception_handlers`
renders them as JSON.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.observability.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """
    Base exception for errors surfaced to API callers.

    Attributes:
        message: Human-readable description returned as ``detail``
        status_code: HTTP status code of the error response
        error: Stable error code returned as ``error``
    """

    status_code: int = 500
    error: str = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedBodyError(AppError):
    """Raised when a request body cannot be read as a key/value mapping."""

    status_code = 400
    error = "malformed_body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        error=exc.error,
        detail=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach JSON renderers for the project's exception types."""
    app.add_exception_handler(AppError, app_error_handler)


__all__ = [
    "AppError",
    "MalformedBodyError",
    "app_error_handler",
    "register_exception_handlers",
]
