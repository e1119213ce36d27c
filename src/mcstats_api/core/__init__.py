"""Core domain models for mcstats-api."""

from mcstats_api.core.models import LivenessStatus, PlayerIdentity, PlayerSummary
from mcstats_api.core.types import Diet, FoodTier

__all__ = [
    "Diet",
    "FoodTier",
    "LivenessStatus",
    "PlayerIdentity",
    "PlayerSummary",
]
