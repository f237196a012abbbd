"""Interface layer error handling.

Maps domain errors to HTTP responses of the form
``{"detail": <message>, "error": <code>}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from arena.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InactiveResourceError,
    InvalidInputError,
    NotFoundError,
)

DOMAIN_ERROR_STATUS: dict[type[DomainError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InactiveResourceError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(error: DomainError) -> int:
    """Resolve the HTTP status for a domain error (most specific class wins)."""
    for cls in type(error).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[cls]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as a JSON response."""
    status_code = status_for(exc)
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error=exc.code,
        detail=str(exc),
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.code},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
