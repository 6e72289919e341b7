"""
Middleware configuration for the application.
Binds per-request log context and records one access line per request.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

# Polled by load balancers; not worth an access line each time
QUIET_PATHS = frozenset({"/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind method and path to every log line of a request, then log its outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request failed", duration_ms=_elapsed_ms(started))
            raise

        if request.url.path not in QUIET_PATHS:
            logger.info(
                "Request handled",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
                client_ip=request.client.host if request.client else "unknown",
            )
        return response


def setup_middleware(app):
    """Setup all middleware for the application."""

    # Added last so it runs first and the request id is set before logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
