# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Metrics middleware."""

import time
from collections.abc import Callable

import prometheus_client as prom  # type: ignore
from fastapi import Request, Response  # type: ignore
from starlette.middleware.base import BaseHTTPMiddleware  # type: ignore

# Prometheus metrics
REQUEST_COUNT = prom.Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code'],
)

REQUEST_LATENCY = prom.Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, float('inf')],
)

REQUEST_IN_PROGRESS = prom.Gauge(
    'http_requests_in_progress',
    'HTTP requests currently in progress',
    ['method'],
)

STATUS_4XX_COUNT = prom.Counter(
    'http_4xx_errors_total',
    'Total HTTP 4xx errors',
    ['method', 'endpoint', 'status_code'],
)

STATUS_5XX_COUNT = prom.Counter(
    'http_5xx_errors_total',
    'Total HTTP 5xx errors',
    ['method', 'endpoint', 'status_code'],
)


def _endpoint(request: Request) -> str:
    """Route template (e.g. /objects/{object_id}) so ids do not become labels."""
    route = request.scope.get('route')
    return getattr(route, 'path', None) or 'unmatched'


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for collecting request metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and collect metrics."""
        method = request.method
        REQUEST_IN_PROGRESS.labels(method=method).inc()
        start_time = time.time()

        try:
            response = await call_next(request)
        finally:
            REQUEST_IN_PROGRESS.labels(method=method).dec()

        duration = time.time() - start_time
        endpoint = _endpoint(request)
        status_code = response.status_code

        REQUEST_COUNT.labels(
            method=method, endpoint=endpoint, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(duration)

        if 400 <= status_code < 500:
            STATUS_4XX_COUNT.labels(
                method=method, endpoint=endpoint, status_code=status_code
            ).inc()
        elif status_code >= 500:
            STATUS_5XX_COUNT.labels(
                method=method, endpoint=endpoint, status_code=status_code
            ).inc()

        return response
