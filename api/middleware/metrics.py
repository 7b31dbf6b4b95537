"""
Middleware to record simple per-path and per-status request metrics.

The counters live in `api.routers.metrics` and are exposed via the
`/api/metrics` endpoint.
"""
from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware

from api.routers.metrics import request_counts, status_counts


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):  # type: ignore[override]
        request_counts[request.url.path] += 1
        response = await call_next(request)
        status_counts[str(response.status_code)] += 1
        return response
