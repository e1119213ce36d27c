"""Static food classification tables.

Item identifiers are partitioned into four mutually exclusive tiers. Only the
vegetarian, pescetarian and meat tiers act as positive signals for the diet
classifier; vegan food is the fallback.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from mcstats_api.core.types import Diet, FoodTier

if TYPE_CHECKING:
    from collections.abc import Mapping

VEGAN_FOODS: frozenset[str] = frozenset(
    {
        "minecraft:apple",
        "minecraft:baked_potato",
        "minecraft:beetroot",
        "minecraft:beetroot_soup",
        "minecraft:bread",
        "minecraft:carrot",
        "minecraft:chorus_fruit",
        "minecraft:dried_kelp",
        "minecraft:enchanted_golden_apple",
        "minecraft:glow_berries",
        "minecraft:golden_apple",
        "minecraft:golden_carrot",
        "minecraft:melon_slice",
        "minecraft:mushroom_stew",
        "minecraft:poisonous_potato",
        "minecraft:potato",
        "minecraft:suspicious_stew",
        "minecraft:sweet_berries",
    }
)

VEGETARIAN_FOODS: frozenset[str] = frozenset(
    {
        "minecraft:cake",
        "minecraft:cookie",
        "minecraft:honey_bottle",
        "minecraft:milk_bucket",
        "minecraft:pumpkin_pie",
    }
)

PESCETARIAN_FOODS: frozenset[str] = frozenset(
    {
        "minecraft:cod",
        "minecraft:cooked_cod",
        "minecraft:cooked_salmon",
        "minecraft:pufferfish",
        "minecraft:salmon",
        "minecraft:tropical_fish",
    }
)

MEAT_FOODS: frozenset[str] = frozenset(
    {
        "minecraft:beef",
        "minecraft:chicken",
        "minecraft:cooked_beef",
        "minecraft:cooked_chicken",
        "minecraft:cooked_mutton",
        "minecraft:cooked_porkchop",
        "minecraft:cooked_rabbit",
        "minecraft:mutton",
        "minecraft:porkchop",
        "minecraft:rabbit",
        "minecraft:rabbit_stew",
        "minecraft:rotten_flesh",
        "minecraft:spider_eye",
    }
)

FOOD_TIERS: Mapping[FoodTier, frozenset[str]] = MappingProxyType(
    {
        FoodTier.VEGAN: VEGAN_FOODS,
        FoodTier.VEGETARIAN: VEGETARIAN_FOODS,
        FoodTier.PESCETARIAN: PESCETARIAN_FOODS,
        FoodTier.MEAT: MEAT_FOODS,
    }
)

# Highest priority first; a single match decides the diet.
DIET_PRECEDENCE: tuple[tuple[FoodTier, Diet], ...] = (
    (FoodTier.MEAT, Diet.CARNIVORE),
    (FoodTier.PESCETARIAN, Diet.PESCETARIAN),
    (FoodTier.VEGETARIAN, Diet.VEGETARIAN),
)

DEFAULT_DIET = Diet.VEGAN


def tier_of(item: str) -> FoodTier | None:
    """Return the food tier an item belongs to, or None for non-food items."""
    for tier, items in FOOD_TIERS.items():
        if item in items:
            return tier
    return None
