"""Trace middleware to inject a trace_id per request.

- Reuses an incoming X-Trace-Id header or generates a new id
- Adds X-Trace-Id response header
- Binds trace_id into structlog contextvars so every log line carries it
- Exposes get_trace_id() for error responses
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from uuid_extensions import uuid7

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)

TRACE_HEADER = "X-Trace-Id"


def get_trace_id() -> str | None:
    """Return the current trace ID, or None outside of a request."""
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a trace ID into each request context."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid7())
        token = trace_id_context.set(trace_id)
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("trace_id")
            trace_id_context.reset(token)
