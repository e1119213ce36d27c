"""Statistic and advancement keys plus lookup helpers for raw JSON snapshots.

Snapshots written by the game server are loosely structured. Every accessor
here checks for presence and type explicitly and falls back to an empty
mapping or zero, so callers never have to guard against missing sections.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

STATS_KEY = "stats"

# Stat sections
CUSTOM_SECTION = "minecraft:custom"
USED_SECTION = "minecraft:used"

# Custom counters
PLAY_TIME = "minecraft:play_time"
DEATHS = "minecraft:deaths"
BELL_RING = "minecraft:bell_ring"
WALK_ONE_CM = "minecraft:walk_one_cm"
SPRINT_ONE_CM = "minecraft:sprint_one_cm"
WALK_UNDER_WATER_ONE_CM = "minecraft:walk_under_water_one_cm"
WALK_ON_WATER_ONE_CM = "minecraft:walk_on_water_one_cm"
SWIM_ONE_CM = "minecraft:swim_one_cm"
BOAT_ONE_CM = "minecraft:boat_one_cm"
PIG_ONE_CM = "minecraft:pig_one_cm"

# Summed into the total distance. Pig riding and the other mounts are not.
LOCOMOTION_COUNTERS: tuple[str, ...] = (
    WALK_ONE_CM,
    SPRINT_ONE_CM,
    WALK_UNDER_WATER_ONE_CM,
    WALK_ON_WATER_ONE_CM,
    SWIM_ONE_CM,
    BOAT_ONE_CM,
)

ADVANCEMENT_CATEGORIES: frozenset[str] = frozenset(
    {
        "minecraft:story",
        "minecraft:nether",
        "minecraft:end",
        "minecraft:adventure",
        "minecraft:husbandry",
    }
)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def stat_section(stat_record: Mapping[str, Any] | None, section: str) -> Mapping[str, Any]:
    """Return one stat section (e.g. ``minecraft:custom``) of a stats record.

    Args:
        stat_record: Parsed stats file, or None when the player has none.
        section: Namespaced section name.

    Returns:
        The section mapping, or an empty mapping if any level is absent.
    """
    if not stat_record:
        return _EMPTY
    stats = stat_record.get(STATS_KEY)
    if not isinstance(stats, dict):
        return _EMPTY
    value = stats.get(section)
    if not isinstance(value, dict):
        return _EMPTY
    return value


def counter(section: Mapping[str, Any], key: str) -> int:
    """Read an integer counter, defaulting to 0 when absent or not an integer."""
    value = section.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def split_advancement_key(key: str) -> tuple[str, str] | None:
    """Split ``"<category>/<name>"`` at the first slash.

    Returns:
        ``(category, name)``, or None when the key has no slash.
    """
    category, sep, name = key.partition("/")
    if not sep:
        return None
    return category, name
