"""Diet classification from consumed food items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcstats_api.core.food import DEFAULT_DIET, DIET_PRECEDENCE, FOOD_TIERS
from mcstats_api.core.stats import USED_SECTION, stat_section
from mcstats_api.core.types import Diet, FoodTier

if TYPE_CHECKING:
    from collections.abc import Mapping


def consumed_tiers(used_items: Mapping[str, Any]) -> set[FoodTier]:
    """Collect the signalling food tiers present in a used-items mapping.

    An item counts when its key is present with a nonzero count. Vegan items
    never signal anything, so the vegan tier is never returned.

    Args:
        used_items: The ``minecraft:used`` section of a stats record.

    Returns:
        Set of food tiers the player has eaten from.
    """
    tiers: set[FoodTier] = set()
    for item, count in used_items.items():
        if count == 0:
            continue
        for tier, _diet in DIET_PRECEDENCE:
            if item in FOOD_TIERS[tier]:
                tiers.add(tier)
    return tiers


def classify_used_items(used_items: Mapping[str, Any]) -> Diet:
    """Classify a used-items mapping by strict tier precedence.

    One recorded use of any meat item makes the player a carnivore no matter
    how much else they ate; likewise fish beats vegetarian food.
    """
    tiers = consumed_tiers(used_items)
    for tier, diet in DIET_PRECEDENCE:
        if tier in tiers:
            return diet
    return DEFAULT_DIET


def classify(stat_record: Mapping[str, Any] | None) -> Diet:
    """Classify a player's diet from their full statistics record.

    Args:
        stat_record: Parsed stats file, or None if the player has none.

    Returns:
        The diet tag; ``vegan`` when nothing classifiable was eaten.
    """
    return classify_used_items(stat_section(stat_record, USED_SECTION))
