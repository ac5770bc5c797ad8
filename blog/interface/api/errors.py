"""Translate domain and application errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from blog.application.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
)
from blog.domain.error import BusinessRuleViolationError, ValidationError
from blog.interface.error import NotAuthorizedError

# Most specific first; the first matching class decides the status code
ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (PydanticValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
]


def status_for(error: Exception) -> int:
    """Return the HTTP status code for a handled error type."""
    for error_type, code in ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Log a rejected request and render its error as JSON."""
    code = status_for(exc)
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        status_code=code,
        error_type=type(exc).__name__,
        error=str(exc),
    )

    headers = None
    if code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    if isinstance(exc, PydanticValidationError):
        detail = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
    else:
        detail = str(exc)

    return JSONResponse(status_code=code, content={"detail": detail}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install a handler for every mapped error type.

    Args:
        app: FastAPI application
    """
    for error_type, _ in ERROR_STATUS:
        app.add_exception_handler(error_type, handle_error)
