"""Translate domain and application errors into JSON responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coursehub.domain.common.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvalidOperationError,
)
from coursehub.exceptions import CoursehubError

logger = structlog.get_logger(__name__)

HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "invalid_request",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal_error",
}


def error_response(status_code: int, code: str, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": code, "detail": detail})


def status_for_domain_error(exc: DomainError) -> int:
    """NotFound is 404, a violated precondition is 400, broken data is 500."""
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, InvalidOperationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for_domain_error(exc)
    log = logger.error if status_code >= 500 else logger.info
    log(
        "domain_error",
        path=request.url.path,
        code=exc.code,
        error=exc.message,
        status_code=status_code,
    )
    return error_response(status_code, exc.code, exc.message)


async def coursehub_error_handler(request: Request, exc: CoursehubError) -> JSONResponse:
    logger.error(
        "application_error",
        path=request.url.path,
        code=exc.code,
        error=exc.message,
        status_code=exc.status_code,
    )
    return error_response(exc.status_code, exc.code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Report malformed request data as 400.

    A missing field is reported as `missing_required_field`, anything else
    as `invalid_request`.
    """
    errors = exc.errors()
    missing = [error for error in errors if error.get("type") == "missing"]
    first = (missing or errors)[0] if errors else None
    code = "missing_required_field" if missing else "invalid_request"
    if first is None:
        detail = "Invalid request"
    else:
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{location}: {first.get('msg', 'invalid value')}"
    logger.info("request_validation_failed", path=request.url.path, code=code, detail=detail)
    return error_response(status.HTTP_400_BAD_REQUEST, code, detail)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    code = HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": code, "detail": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global handler for anything the routers did not translate."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(CoursehubError, coursehub_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        StarletteHTTPException,
        http_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
