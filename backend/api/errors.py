"""Exception handlers mapping errors to ``{"error": message}`` bodies.

DomainError subclasses carry their own HTTP status. Request validation
failures answer 400; anything else is logged with its stack trace and
answers a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.shared.errors import DomainError, InternalError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "error": exc.message},
            exc_info=exc,
        )
    else:
        logger.warning(
            "Request rejected",
            extra={"path": request.url.path, "error": exc.message},
        )
    return _error_response(exc.http_status, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    logger.warning("Validation error", extra={"path": request.url.path, "errors": str(errors)})

    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {field} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error", extra={"path": request.url.path})
    error = InternalError("Internal server error")
    return _error_response(error.http_status, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
