"""Request middleware: correlation IDs, access logging and request metrics."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.observability.logging import clear_correlation_id, get_logger, set_correlation_id
from app.observability.metrics import increment_counter, record_histogram

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to every request and record how it went."""

    def __init__(self, app: ASGIApp, record_metrics: bool = True) -> None:
        super().__init__(app)
        self.record_metrics = record_metrics

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(REQUEST_ID_HEADER))
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time
            endpoint = _endpoint_label(request, response.status_code)

            response.headers[REQUEST_ID_HEADER] = correlation_id
            if self.record_metrics:
                labels = {"method": request.method, "endpoint": endpoint}
                increment_counter(
                    "http_requests_total",
                    labels={**labels, "status": str(response.status_code)},
                )
                record_histogram("http_request_duration_seconds", duration, labels=labels)

            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 3),
            )
            return response
        finally:
            clear_correlation_id()


def _endpoint_label(request: Request, status_code: int) -> str:
    """Return the request path, folding unknown paths into one label.

    The app declares no path parameters, so every path that reaches a route
    is one of a fixed set and metric label cardinality stays bounded.
    """
    if status_code == 404:
        return "unmatched"
    return request.url.path


__all__ = ["RequestContextMiddleware", "REQUEST_ID_HEADER"]
