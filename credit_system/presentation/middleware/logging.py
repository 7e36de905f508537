"""Request/response logging middleware with timing and metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from credit_system.core.config import settings
from credit_system.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _route_template(request: Request) -> str:
    # Path parameters go back in as {name} so label cardinality stays bounded.
    names = {str(value): name for name, value in request.path_params.items()}
    segments = [
        f"{{{names[segment]}}}" if segment in names else segment
        for segment in request.url.path.split("/")
    ]
    return "/".join(segments)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion and duration; records HTTP metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        query = str(request.query_params) if request.query_params else None

        log = logger.bind(method=method, path=path)
        log.info("request_started", query=query)

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            if settings.metrics_enabled:
                record_http_request(method, _route_template(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        if settings.metrics_enabled:
            record_http_request(method, _route_template(request), response.status_code, duration)

        return response
