"""FastAPI Exception Handlers

Every failure leaving the API is an AppError serialized by `AppError.to_dict`.
Handlers stamp the error with the request's correlation ID (set by
RequestLoggingMiddleware) so a response can be matched to its log lines.
"""
from __future__ import annotations

from typing import TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.logging import get_logger

from .types import AppError, ErrorCode, ErrorContext, Result

log = get_logger("errors.handlers")

T = TypeVar("T")


class AppErrorException(Exception):
    """Carries an AppError through code that cannot return a Result.

    Raised for fatal data-integrity failures (unknown gender or animacy),
    by the app lifespan when the lexicon cannot be loaded, and by route
    handlers via `raise_result`.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))


def _respond(request: Request, error: AppError, status_code: int | None = None) -> JSONResponse:
    error = error.with_context(correlation_id=getattr(request.state, "correlation_id", None))
    status_code = status_code or error.code.http_status

    if error.code.is_fatal:
        # corrupt lexicon data: someone has to fix the files, not the request
        log_method = log.critical
    else:
        log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        fatal=error.code.is_fatal,
        error_code=error.code.name,
        status=status_code,
        message=error.message,
        origin=error.context.origin,
        metadata=error.metadata,
    )
    return JSONResponse(status_code=status_code, content=error.to_dict())


async def app_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    return _respond(request, exc.error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and other framework-level HTTP errors keep their status."""
    code = ErrorCode.E4000_LEXICON_GENERIC if exc.status_code == 404 else ErrorCode.E9000_INTERNAL_GENERIC
    error = AppError(
        code=code,
        message=str(exc.detail) if exc.detail else f"HTTP {exc.status_code}",
        context=ErrorContext(origin="http"),
    )
    return _respond(request, error, exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Query/path values outside a closed set, e.g. `case=vocative`."""
    details = [
        {
            "field": ".".join(str(part) for part in e.get("loc", ())),
            "message": e.get("msg", ""),
            "type": e.get("type", ""),
        }
        for e in exc.errors()
    ]
    error = AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message="Request validation failed",
        context=ErrorContext(origin="request_validation"),
        metadata={"details": details},
    )
    return _respond(request, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled_exception", error_type=type(exc).__name__, error_message=str(exc))
    error = AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message="An unexpected error occurred",
        context=ErrorContext(origin="unhandled"),
        cause=exc,
    )
    return _respond(request, error)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppErrorException, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def raise_result(result: Result[T, AppError]) -> T:
    """Unwrap an Ok, or leave the route handler with the Err's error.

    Usage:
        form = raise_result(service.decline_noun(word, case, number))
    """
    if result.is_err():
        raise AppErrorException(result.unwrap_err())
    return result.unwrap()
