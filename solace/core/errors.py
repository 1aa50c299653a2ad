"""
Domain exceptions and the FastAPI handlers that render them.
Every error response body is {"error": "<message>"}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SolaceError(Exception):
    """Base class for errors raised by services. Carries the HTTP status it maps to."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(SolaceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(SolaceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(SolaceError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(SolaceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(SolaceError):
    status_code = status.HTTP_409_CONFLICT


class PaymentProviderError(SolaceError):
    """Stripe rejected or failed a call."""

    status_code = status.HTTP_502_BAD_GATEWAY


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def solace_error_handler(request: Request, exc: SolaceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return _error(exc.status_code, exc.message, headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error(exc.status_code, message, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are a plain 400 carrying the first problem found."""
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "Invalid request")
    if loc:
        message = f"{'.'.join(loc)}: {message}"
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception in %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on the application."""
    app.add_exception_handler(SolaceError, solace_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
