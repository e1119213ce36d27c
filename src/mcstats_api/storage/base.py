"""Storage protocol definition for mcstats-api."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mcstats_api.core.models import PlayerIdentity


@runtime_checkable
class StorageProtocol(Protocol):
    """Protocol defining the read interface for player snapshots.

    Implementations are read-only. A missing source is reported as empty data
    (an empty roster or None), never as an exception.
    """

    def load_roster(self) -> list[PlayerIdentity]:
        """Load every known player identity.

        Returns:
            Identities in roster order, or an empty list if there is no roster.

        Raises:
            MalformedRecordError: If the roster exists but cannot be parsed.
        """
        ...

    def read_stats(self, player_id: str) -> dict[str, Any] | None:
        """Read the statistics record of one player.

        Args:
            player_id: The player's UUID.

        Returns:
            The parsed record, or None if the player has no statistics.

        Raises:
            MalformedRecordError: If the record exists but cannot be parsed.
        """
        ...

    def read_advancements(self, player_id: str) -> dict[str, Any] | None:
        """Read the advancement record of one player.

        Args:
            player_id: The player's UUID.

        Returns:
            The parsed record, or None if the player has no advancements.

        Raises:
            MalformedRecordError: If the record exists but cannot be parsed.
        """
        ...

    def readiness(self) -> dict[str, bool]:
        """Report whether each underlying source can currently be read.

        Returns:
            Mapping of check name to result.
        """
        ...
