"""FastAPI middleware for scrape logging and trace IDs."""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with timing and a trace ID.

    Requests to the metrics path are logged as ``scrape`` events carrying the
    payload size; everything else is logged as ``request``.
    """

    def __init__(self, app: ASGIApp, metrics_path: str = "/metrics") -> None:
        super().__init__(app)
        self.metrics_path = metrics_path

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        log = structlog.get_logger()

        path = request.url.path
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            log.error("request_failed", method=request.method, path=path, error=str(e))
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        if path == self.metrics_path:
            log.info(
                "scrape",
                method=request.method,
                status=response.status_code,
                bytes=int(response.headers.get("content-length", 0)),
                duration_ms=duration_ms,
            )
        else:
            log.info(
                "request",
                method=request.method,
                path=path,
                status=response.status_code,
                duration_ms=duration_ms,
            )

        # Lets a scraper correlate its request with the exporter's log line
        response.headers["X-Request-ID"] = trace_id

        return response
