"""Core domain models for mcstats-api."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mcstats_api.core.types import Diet


@dataclass(frozen=True)
class PlayerIdentity:
    """A known player taken from the server's user cache.

    Attributes:
        id: Player UUID in its canonical dashed string form.
        name: Last known display name.
    """

    id: str
    name: str


@dataclass
class PlayerSummary:
    """Normalized per-player statistics.

    Attributes:
        id: Player UUID.
        name: Display name.
        playtime_ticks: Total ticks spent in game.
        deaths: Number of deaths.
        total_distance_cm: Walking, sprinting, underwater walking, water-surface
            walking, swimming and boat distance combined.
        pig_distance_cm: Distance travelled riding a pig (not in the total).
        boat_distance_cm: Distance travelled by boat.
        diet: Diet classification derived from consumed food.
        bell_rings: Number of times a bell was rung.
        advancement_names: Short names of completed advancements.
    """

    id: str
    name: str
    playtime_ticks: int = 0
    deaths: int = 0
    total_distance_cm: int = 0
    pig_distance_cm: int = 0
    boat_distance_cm: int = 0
    diet: Diet = Diet.VEGAN
    bell_rings: int = 0
    advancement_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON payload served by ``/players``."""
        return {
            "id": self.id,
            "name": self.name,
            "playtimeTicks": self.playtime_ticks,
            "deaths": self.deaths,
            "totalDistanceCm": self.total_distance_cm,
            "pigDistanceCm": self.pig_distance_cm,
            "boatDistanceCm": self.boat_distance_cm,
            "diet": self.diet.value,
            "bellRings": self.bell_rings,
            "advancementNames": list(self.advancement_names),
        }


@dataclass
class LivenessStatus:
    """Result of probing the game server."""

    online: bool
    player_count: int = 0
    max_players: int = 0
    online_names: list[str] = field(default_factory=list)

    @classmethod
    def offline(cls, max_players: int) -> LivenessStatus:
        """Build the fixed payload reported when the server cannot be reached."""
        return cls(online=False, player_count=0, max_players=max_players, online_names=[])

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON payload served by ``/status``."""
        return {
            "online": self.online,
            "playerCount": self.player_count,
            "maxPlayers": self.max_players,
            "onlineNames": list(self.online_names),
        }
