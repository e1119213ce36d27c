"""Deployment settings for mcstats-api."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


@dataclass
class McStatsSettings:
    """Paths, probe target and runtime flags for one deployment.

    Environment variables:
        MCSTATS_USERCACHE: Path to the server's usercache.json roster
        MCSTATS_STATS_DIR: Directory holding ``<uuid>.json`` statistics files
        MCSTATS_ADVANCEMENTS_DIR: Directory holding ``<uuid>.json`` advancement files
        MCSTATS_SERVER_ADDRESS: Hostname of the game server to probe
        MCSTATS_SERVER_PORT: Port of the game server to probe
        MCSTATS_STATUS_TIMEOUT_MS: Probe timeout in milliseconds
        MCSTATS_FALLBACK_MAX_PLAYERS: maxPlayers reported while the server is offline
        MCSTATS_SKIP_MALFORMED: Omit players with unreadable files instead of failing
        MCSTATS_PORT: Listen port used by the bundled uvicorn runner (examples/app.py);
            ``litestar run`` takes its own ``--port``
        MCSTATS_DEBUG: Enable debug mode and debug logging
        MCSTATS_JSON_LOGS: Emit logs as JSON
    """

    # Snapshot sources
    usercache_path: Path = field(default_factory=lambda: Path(os.getenv("MCSTATS_USERCACHE", "/usercache.json")))
    stats_dir: Path = field(default_factory=lambda: Path(os.getenv("MCSTATS_STATS_DIR", "/mcstats")))
    advancements_dir: Path = field(
        default_factory=lambda: Path(os.getenv("MCSTATS_ADVANCEMENTS_DIR", "/mcadvancements"))
    )

    # Liveness probe
    server_address: str = field(default_factory=lambda: os.getenv("MCSTATS_SERVER_ADDRESS", "mc"))
    server_port: int = field(default_factory=lambda: _env_int("MCSTATS_SERVER_PORT", 25565))
    status_timeout_ms: int = field(default_factory=lambda: _env_int("MCSTATS_STATUS_TIMEOUT_MS", 5000))
    fallback_max_players: int = field(default_factory=lambda: _env_int("MCSTATS_FALLBACK_MAX_PLAYERS", 40))

    # Aggregation policy
    skip_malformed: bool = field(default_factory=lambda: _env_flag("MCSTATS_SKIP_MALFORMED"))

    # Runtime
    port: int = field(default_factory=lambda: _env_int("MCSTATS_PORT", 3000))
    debug: bool = field(default_factory=lambda: _env_flag("MCSTATS_DEBUG"))
    json_logs: bool = field(default_factory=lambda: _env_flag("MCSTATS_JSON_LOGS"))
