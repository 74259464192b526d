# api/metrics.py
import time

from fastapi import Request
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match, Mount

UNMATCHED = "unmatched"

# labelled by route template, never by the raw URL
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "path"],
)

UPSTREAM_ERRORS = Counter(
    "eq_rows_upstream_errors_total",
    "Failed AFAD round trips by failure kind",
    ["kind"],
)


def _mount_path(request: Request):
    for route in request.app.routes:
        if isinstance(route, Mount) and route.matches(request.scope)[0] == Match.FULL:
            return route.path
    return None


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # mounts rewrite the scope on the way in, so resolve them first
        mount = _mount_path(request)
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        route = request.scope.get("route")
        path = getattr(route, "path", None) or mount or UNMATCHED
        method = request.method

        REQUEST_COUNT.labels(method=method, path=path, status=response.status_code).inc()
        REQUEST_LATENCY.labels(method=method, path=path).observe(process_time)

        return response
