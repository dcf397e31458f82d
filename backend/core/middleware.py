"""Request logging middleware with correlation IDs."""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import api_logger, bind_context, clear_context, generate_correlation_id

log = api_logger()

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One `request_completed` event per request, tagged with a correlation ID.

    The ID comes from the caller's header when present. It is stored on
    `request.state` for the error handlers and echoed in the response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        request.state.correlation_id = correlation_id

        clear_context()
        bind_context(correlation_id=correlation_id, path=request.url.path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                method=request.method,
                error_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        else:
            response.headers[CORRELATION_HEADER] = correlation_id
            level = "info" if response.status_code < 400 else "warning" if response.status_code < 500 else "error"
            getattr(log, level)(
                "request_completed",
                method=request.method,
                status=response.status_code,
                query=str(request.query_params) or None,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_context()
