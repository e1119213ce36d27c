"""Player summary aggregation service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from mcstats_api.core import stats as keys
from mcstats_api.core.models import PlayerSummary
from mcstats_api.exceptions import MalformedRecordError
from mcstats_api.services.advancements import extract_names
from mcstats_api.services.diet import classify

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mcstats_api.core.models import PlayerIdentity
    from mcstats_api.storage.base import StorageProtocol

logger = structlog.get_logger(__name__)


def aggregate(
    identity: PlayerIdentity,
    stat_record: Mapping[str, Any] | None,
    achievement_record: Mapping[str, Any] | None,
) -> PlayerSummary:
    """Build the normalized summary for one player.

    Missing records are treated as empty, so a player who never joined gets
    zero counters, a vegan diet and no advancements.

    Args:
        identity: The player to summarize.
        stat_record: Parsed stats file, or None.
        achievement_record: Parsed advancements file, or None.

    Returns:
        The player's summary.
    """
    custom = keys.stat_section(stat_record, keys.CUSTOM_SECTION)

    return PlayerSummary(
        id=identity.id,
        name=identity.name,
        playtime_ticks=keys.counter(custom, keys.PLAY_TIME),
        deaths=keys.counter(custom, keys.DEATHS),
        total_distance_cm=sum(keys.counter(custom, key) for key in keys.LOCOMOTION_COUNTERS),
        pig_distance_cm=keys.counter(custom, keys.PIG_ONE_CM),
        boat_distance_cm=keys.counter(custom, keys.BOAT_ONE_CM),
        diet=classify(stat_record),
        bell_rings=keys.counter(custom, keys.BELL_RING),
        advancement_names=extract_names(achievement_record),
    )


class PlayerService:
    """Service producing player summaries from a storage backend.

    Usage:
        service = PlayerService(FileSystemStorage.from_settings(settings))
        summaries = service.list_summaries()

    By default a malformed record anywhere fails the whole batch. With
    ``skip_malformed`` the affected player is left out and a warning logged.
    """

    def __init__(self, storage: StorageProtocol, *, skip_malformed: bool = False) -> None:
        """Initialize the service.

        Args:
            storage: Source of roster, statistics and advancement records.
            skip_malformed: Omit players whose records cannot be parsed.
        """
        self._storage = storage
        self.skip_malformed = skip_malformed

    def summarize(self, identity: PlayerIdentity) -> PlayerSummary:
        """Read one player's records and aggregate them.

        Raises:
            MalformedRecordError: If either record exists but cannot be parsed.
        """
        with structlog.contextvars.bound_contextvars(player_id=identity.id):
            stat_record = self._storage.read_stats(identity.id)
            achievement_record = self._storage.read_advancements(identity.id)
            summary = aggregate(identity, stat_record, achievement_record)
            logger.debug("Summarized player", diet=summary.diet.value, advancements=len(summary.advancement_names))
        return summary

    def readiness(self) -> dict[str, bool]:
        """Report whether the underlying snapshot sources can be read."""
        return self._storage.readiness()

    def list_summaries(self) -> list[PlayerSummary]:
        """Summarize every player in the roster, in roster order.

        Raises:
            MalformedRecordError: If the roster is malformed, or any player
                record is malformed and ``skip_malformed`` is off.
        """
        roster = self._storage.load_roster()
        summaries: list[PlayerSummary] = []
        for identity in roster:
            try:
                summaries.append(self.summarize(identity))
            except MalformedRecordError as e:
                if not self.skip_malformed:
                    raise
                logger.warning(
                    "Skipping player with malformed record",
                    player_id=identity.id,
                    player_name=identity.name,
                    path=e.path,
                    reason=e.reason,
                )

        logger.debug("Aggregated player summaries", roster_size=len(roster), returned=len(summaries))
        return summaries
