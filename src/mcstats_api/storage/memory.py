"""In-memory storage implementation for mcstats-api."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcstats_api.core.models import PlayerIdentity


class InMemoryStorage:
    """Storage backed by plain dictionaries.

    Useful for tests and for embedding the aggregator without a game server
    data directory. Returned records are deep copies so callers cannot mutate
    the stored fixtures.

    Attributes:
        _roster: Identities in roster order.
        _stats: Statistics records keyed by player id.
        _advancements: Advancement records keyed by player id.
    """

    def __init__(
        self,
        roster: list[PlayerIdentity] | None = None,
        stats: dict[str, dict[str, Any]] | None = None,
        advancements: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the storage with optional fixture data."""
        self._roster = list(roster or [])
        self._stats = dict(stats or {})
        self._advancements = dict(advancements or {})

    def load_roster(self) -> list[PlayerIdentity]:
        """Return a copy of the roster."""
        return list(self._roster)

    def read_stats(self, player_id: str) -> dict[str, Any] | None:
        """Return a copy of a player's statistics record, if any."""
        record = self._stats.get(player_id)
        return copy.deepcopy(record) if record is not None else None

    def read_advancements(self, player_id: str) -> dict[str, Any] | None:
        """Return a copy of a player's advancement record, if any."""
        record = self._advancements.get(player_id)
        return copy.deepcopy(record) if record is not None else None

    def readiness(self) -> dict[str, bool]:
        """In-memory storage is always ready."""
        return {"storage": True}
