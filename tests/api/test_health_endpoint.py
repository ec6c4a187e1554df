"""API tests for GET /health."""

import pytest

import src.main


class _FakeDatabase:
    def __init__(self, reachable: bool) -> None:
        self._reachable = reachable

    async def check_connection(self) -> bool:
        return self._reachable


@pytest.mark.api
class TestHealth:
    def test_healthy_when_database_reachable(self, client, monkeypatch):
        monkeypatch.setattr(src.main, "get_database", lambda: _FakeDatabase(True))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "ok"

    def test_degraded_when_database_unreachable(self, client, monkeypatch):
        monkeypatch.setattr(src.main, "get_database", lambda: _FakeDatabase(False))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "degraded",
            "version": src.main.settings.app_version,
            "database": "unavailable",
        }

    def test_response_carries_trace_header(self, client, monkeypatch):
        monkeypatch.setattr(src.main, "get_database", lambda: _FakeDatabase(True))

        response = client.get("/health", headers={"X-Trace-Id": "trace-42"})

        assert response.headers["X-Trace-Id"] == "trace-42"
