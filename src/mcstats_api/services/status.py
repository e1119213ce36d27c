"""Liveness probe against the game server.

Uses the Server List Ping implementation from ``mcstatus``. On the default
port the lookup resolves SRV records, so the configured address may be a
domain that delegates to another host.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import structlog
from mcstatus import JavaServer

from mcstats_api.core.models import LivenessStatus

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from mcstats_api.config import McStatsSettings

    ServerLookup = Callable[..., Awaitable[Any]]

logger = structlog.get_logger(__name__)

DEFAULT_PORT = 25565
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_FALLBACK_MAX_PLAYERS = 40


async def probe(
    address: str,
    port: int,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    *,
    fallback_max_players: int = DEFAULT_FALLBACK_MAX_PLAYERS,
    lookup: ServerLookup | None = None,
) -> LivenessStatus:
    """Query a game server once and report whether it is online.

    Never raises: any failure (timeout, refused connection, DNS or protocol
    error) yields the fixed offline payload.

    Args:
        address: Hostname or IP of the game server.
        port: Game server port.
        timeout_ms: Upper bound for the whole query, in milliseconds.
        fallback_max_players: ``maxPlayers`` reported while offline.
        lookup: Replacement for ``JavaServer.async_lookup``; must return an
            object with an ``async_status()`` coroutine.

    Returns:
        Live status, or the offline fallback.
    """
    lookup = lookup or JavaServer.async_lookup
    timeout = timeout_ms / 1000
    # SRV records are only consulted when no explicit port is given
    target = address if port == DEFAULT_PORT else f"{address}:{port}"

    async def _query() -> LivenessStatus:
        server = await lookup(target, timeout=timeout)
        response = await server.async_status()
        players = response.players
        # Many servers hide the player sample
        sample = players.sample or []
        return LivenessStatus(
            online=True,
            player_count=players.online,
            max_players=players.max,
            online_names=[player.name for player in sample],
        )

    try:
        status = await asyncio.wait_for(_query(), timeout=timeout)
    except Exception as e:  # noqa: BLE001
        logger.info(
            "Game server unreachable",
            address=address,
            port=port,
            error_type=type(e).__name__,
            error=str(e),
        )
        return LivenessStatus.offline(fallback_max_players)

    logger.debug("Game server online", address=address, port=port, player_count=status.player_count)
    return status


class StatusService:
    """Service probing the configured game server.

    Attributes:
        address: Hostname of the game server.
        port: Game server port.
        timeout_ms: Probe timeout in milliseconds.
        fallback_max_players: ``maxPlayers`` reported while offline.
    """

    def __init__(
        self,
        address: str,
        port: int,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        fallback_max_players: int = DEFAULT_FALLBACK_MAX_PLAYERS,
        lookup: ServerLookup | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            address: Hostname of the game server.
            port: Game server port.
            timeout_ms: Probe timeout in milliseconds.
            fallback_max_players: ``maxPlayers`` reported while offline.
            lookup: Optional replacement for the server lookup, for tests.
        """
        self.address = address
        self.port = port
        self.timeout_ms = timeout_ms
        self.fallback_max_players = fallback_max_players
        self._lookup = lookup

    @classmethod
    def from_settings(cls, settings: McStatsSettings, *, lookup: ServerLookup | None = None) -> StatusService:
        """Create a service from deployment settings."""
        return cls(
            settings.server_address,
            settings.server_port,
            timeout_ms=settings.status_timeout_ms,
            fallback_max_players=settings.fallback_max_players,
            lookup=lookup,
        )

    async def probe(self) -> LivenessStatus:
        """Probe the configured server once."""
        return await probe(
            self.address,
            self.port,
            self.timeout_ms,
            fallback_max_players=self.fallback_max_players,
            lookup=self._lookup,
        )
