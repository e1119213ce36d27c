"""Tests for structured logging and the logging middleware."""

from __future__ import annotations

from litestar import Litestar
from litestar.testing import TestClient
from structlog.testing import capture_logs

from mcstats_api.core.logging import HEALTH_PATHS, RequestLoggingMiddleware, correlation_id_from


def _completed(logs: list[dict]) -> list[dict]:
    return [entry for entry in logs if entry["event"] == "Request completed"]


class TestRequestLogging:
    """Tests for RequestLoggingMiddleware."""

    def test_health_endpoints_are_not_logged(self, client: TestClient[Litestar]) -> None:
        """Orchestrator polling of /health and /ready produces no request lines."""
        with capture_logs() as logs:
            assert client.get("/health").status_code == 200
            assert client.get("/ready").status_code == 200
        assert _completed(logs) == []

    def test_api_requests_are_logged(self, client: TestClient[Litestar]) -> None:
        """Each API request logs status, duration, size and client address."""
        with capture_logs() as logs:
            response = client.get("/players")
        completed = _completed(logs)
        assert len(completed) == 1
        entry = completed[0]
        assert entry["log_level"] == "info"
        assert entry["status_code"] == 200
        assert entry["response_bytes"] == len(response.content)
        assert entry["duration_ms"] >= 0
        assert entry["client_ip"]

    def test_default_exclusions(self) -> None:
        """Without explicit exclusions only the health paths are skipped."""
        middleware = RequestLoggingMiddleware(app=None)  # type: ignore[arg-type]
        assert middleware.exclude_paths == HEALTH_PATHS
        assert RequestLoggingMiddleware(app=None, exclude_paths=set()).exclude_paths == frozenset()  # type: ignore[arg-type]


class TestCorrelationId:
    """Tests for correlation ID selection."""

    def test_prefers_correlation_header(self) -> None:
        """X-Correlation-ID wins over X-Request-ID."""
        scope = {"headers": [(b"x-request-id", b"req-1"), (b"x-correlation-id", b"corr-1")]}
        assert correlation_id_from(scope) == "corr-1"  # type: ignore[arg-type]

    def test_falls_back_to_request_id(self, client: TestClient[Litestar]) -> None:
        """An upstream X-Request-ID is reused as the correlation ID."""
        response = client.get("/status", headers={"X-Request-ID": "req-42"})
        assert response.headers["x-correlation-id"] == "req-42"

    def test_generates_when_absent(self) -> None:
        """Each request without headers gets a distinct ID."""
        assert correlation_id_from({"headers": []}) != correlation_id_from({"headers": []})  # type: ignore[arg-type]


class TestLifespanLogging:
    """Tests for the startup and shutdown messages."""

    def test_startup_and_shutdown_are_logged(self, app: Litestar) -> None:
        """Entering the app logs where it reads from; leaving it logs the stop."""
        with capture_logs() as logs, TestClient(app=app):
            pass

        events = [entry["event"] for entry in logs]
        assert "Minecraft Stats API running" in events
        assert events.index("Minecraft Stats API running") < events.index("Minecraft Stats API stopped")

        startup = next(entry for entry in logs if entry["event"] == "Minecraft Stats API running")
        assert startup["log_level"] == "info"
        assert startup["server"] == "mc.example.com:25565"
        assert startup["stats_dir"].endswith("stats")
        assert "port" not in startup
