"""Health check endpoints for mcstats-api.

``/health`` and ``/ready`` only look at the snapshot files on disk. They never
contact the game server, so an offline server does not fail a container's
liveness check. Use ``/status`` for that.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, ClassVar

from litestar import Controller, get

from mcstats_api import __version__
from mcstats_api.services.players import PlayerService


def _now() -> str:
    return datetime.now(UTC).isoformat()


class HealthStatus(StrEnum):
    """Health check status values, worst last."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    """Health status of an individual component."""

    name: str
    status: HealthStatus
    message: str | None = None
    latency_ms: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "status": self.status.value, "message": self.message, "latency_ms": self.latency_ms}


@dataclass
class HealthResponse:
    """Body of ``GET /health``."""

    components: list[ComponentHealth]
    version: str = __version__
    timestamp: str = field(default_factory=_now)

    @property
    def status(self) -> HealthStatus:
        """The worst status among the components."""
        order = list(HealthStatus)
        return max((c.status for c in self.components), key=order.index, default=HealthStatus.HEALTHY)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "version": self.version,
            "timestamp": self.timestamp,
            "components": [c.to_dict() for c in self.components],
        }


@dataclass
class ReadyResponse:
    """Body of ``GET /ready``."""

    checks: dict[str, bool]
    timestamp: str = field(default_factory=_now)

    @property
    def ready(self) -> bool:
        return all(self.checks.values())

    def to_dict(self) -> dict[str, Any]:
        return {"ready": self.ready, "timestamp": self.timestamp, "checks": dict(self.checks)}


def snapshot_health(player_service: PlayerService) -> ComponentHealth:
    """Time a readiness check of the snapshot sources.

    Missing sources degrade the app rather than fail it: ``/players`` still
    answers with whatever can be read.
    """
    started = time.perf_counter()
    checks = player_service.readiness()
    latency_ms = round((time.perf_counter() - started) * 1000, 2)

    missing = sorted(name for name, ok in checks.items() if not ok)
    if missing:
        return ComponentHealth("storage", HealthStatus.DEGRADED, f"Unavailable: {', '.join(missing)}", latency_ms)
    return ComponentHealth("storage", HealthStatus.HEALTHY, "Snapshot sources readable", latency_ms)


class HealthController(Controller):
    """Liveness and readiness endpoints for container orchestration."""

    path = ""
    include_in_schema: ClassVar[bool] = True
    tags: ClassVar[list[str]] = ["Health"]

    # Both handlers stat the filesystem, so they run off the event loop.
    @get("/health", sync_to_thread=True)
    def health(self, player_service: PlayerService) -> dict[str, Any]:
        """Liveness endpoint: application status plus snapshot storage status."""
        components = [
            ComponentHealth("application", HealthStatus.HEALTHY, "Application is running"),
            snapshot_health(player_service),
        ]
        return HealthResponse(components=components).to_dict()

    @get("/ready", sync_to_thread=True)
    def ready(self, player_service: PlayerService) -> dict[str, Any]:
        """Readiness endpoint: one boolean per snapshot source."""
        return ReadyResponse(checks={"application": True, **player_service.readiness()}).to_dict()
