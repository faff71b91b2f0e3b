"""
Middleware configuration: correlation ID and request logging.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        log = logger.bind(method=request.method, path=request.url.path)
        log.info("Request started", client_ip=request.client.host if request.client else "unknown")

        try:
            response = await call_next(request)
        except Exception:
            log.exception(
                "Request failed",
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        log.info(
            "Request completed",
            status_code=response.status_code,
            process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response


def setup_middleware(app):
    """Install middleware. Starlette runs the last added first, so logging sits inside the correlation ID."""
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
