"""Litestar controllers for mcstats-api endpoints."""

from __future__ import annotations

from typing import Any, ClassVar

from litestar import Controller, get

from mcstats_api.services.players import PlayerService
from mcstats_api.services.status import StatusService


class StatusController(Controller):
    """Controller reporting whether the game server is online."""

    path = "/status"
    tags: ClassVar[list[str]] = ["Status"]

    @get("/")
    async def get_status(self, status_service: StatusService) -> dict[str, Any]:
        """Probe the game server.

        Always answers 200; an unreachable server is reported with
        ``online: false`` rather than an error status.

        Args:
            status_service: The status service instance (injected).

        Returns:
            Online flag, player counts and the visible player names.
        """
        status = await status_service.probe()
        return status.to_dict()


class PlayersController(Controller):
    """Controller for aggregated player statistics."""

    path = "/players"
    tags: ClassVar[list[str]] = ["Players"]

    @get("/", sync_to_thread=True)
    def list_players(self, player_service: PlayerService) -> list[dict[str, Any]]:
        """List a summary for every known player, in roster order.

        Args:
            player_service: The player service instance (injected).

        Returns:
            One summary per roster entry.

        Raises:
            MalformedRecordError: If a roster or player file cannot be parsed.
        """
        return [summary.to_dict() for summary in player_service.list_summaries()]
