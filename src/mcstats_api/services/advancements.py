"""Extraction of completed advancement names."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcstats_api.core.stats import ADVANCEMENT_CATEGORIES, split_advancement_key

if TYPE_CHECKING:
    from collections.abc import Mapping


def extract_names(achievement_record: Mapping[str, Any] | None) -> list[str]:
    """List short names of completed advancements in recognized categories.

    Keys look like ``"minecraft:story/mine_stone"``. Recipe unlocks, keys
    without a slash (``DataVersion``) and unfinished advancements are skipped.
    Output follows the record's key order.

    Args:
        achievement_record: Parsed advancements file, or None.

    Returns:
        Names such as ``"mine_stone"``.
    """
    if not achievement_record:
        return []

    names: list[str] = []
    for key, entry in achievement_record.items():
        parts = split_advancement_key(key)
        if parts is None:
            continue
        category, name = parts
        if category not in ADVANCEMENT_CATEGORIES:
            continue
        if isinstance(entry, dict) and entry.get("done") is True:
            names.append(name)
    return names
