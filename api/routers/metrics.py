"""
Metrics endpoints and utilities.

`/api/metrics` returns cumulative request counts per path and per response
status since the application started.  The counters are filled in by
:class:`api.middleware.metrics.MetricsMiddleware`.
"""
from __future__ import annotations

from collections import Counter
from fastapi import APIRouter


request_counts: Counter[str] = Counter()
status_counts: Counter[str] = Counter()

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics")
def metrics() -> dict[str, dict[str, int]]:
    """Return request counters keyed by path and by status code."""
    return {"requests": dict(request_counts), "statuses": dict(status_counts)}
