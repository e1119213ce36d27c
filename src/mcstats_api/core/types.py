"""Type definitions for player summaries."""

from __future__ import annotations

from enum import StrEnum


class FoodTier(StrEnum):
    """Tiers of the static food classification."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    PESCETARIAN = "pescetarian"
    MEAT = "meat"


class Diet(StrEnum):
    """Diet tag derived from the food items a player has consumed."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    PESCETARIAN = "pescetarian"
    CARNIVORE = "carnivore"
