"""
Middleware for assigning correlation IDs to incoming requests.

This module defines a Starlette `BaseHTTPMiddleware` subclass that injects a
unique UUID into a context variable for each request.  A logging filter copies
the value onto every log record so entries belonging to the same request can
be correlated.  The ID is also returned to clients via the `X-Request-ID`
response header.
"""
from __future__ import annotations

import contextvars
import logging
import uuid
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable to hold the current request ID
request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


class RequestIdFilter(logging.Filter):
    """Stamp ``record.request_id`` with the current request's ID (or "-")."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get(None) or "-"
        return True


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that sets a unique request ID for each request."""

    async def dispatch(self, request, call_next):  # type: ignore[override]
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_ctx.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers.setdefault("X-Request-ID", rid)
        return response
