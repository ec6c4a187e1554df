"""Unit tests for TraceMiddleware (on a minimal app)."""

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.presentation.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
    get_trace_id,
)


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(TraceMiddleware)

    @app.get("/trace")
    async def trace():
        return {
            "trace_id": get_trace_id(),
            "bound": structlog.contextvars.get_contextvars().get("trace_id"),
        }

    return TestClient(app)


@pytest.mark.unit
class TestTraceMiddleware:
    def test_generates_trace_id(self, client):
        response = client.get("/trace")

        trace_id = response.headers[TRACE_HEADER]
        assert trace_id
        assert response.json() == {"trace_id": trace_id, "bound": trace_id}

    def test_reuses_incoming_trace_id(self, client):
        response = client.get("/trace", headers={TRACE_HEADER: "abc-123"})

        assert response.headers[TRACE_HEADER] == "abc-123"
        assert response.json()["trace_id"] == "abc-123"

    def test_trace_id_is_cleared_outside_requests(self, client):
        client.get("/trace")

        assert get_trace_id() is None
