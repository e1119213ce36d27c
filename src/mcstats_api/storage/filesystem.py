"""Filesystem storage reading the game server's JSON snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import UUID

import structlog

from mcstats_api.core.models import PlayerIdentity
from mcstats_api.exceptions import MalformedRecordError

if TYPE_CHECKING:
    from mcstats_api.config import McStatsSettings

logger = structlog.get_logger(__name__)


def _read_json(path: Path) -> Any:
    """Parse a JSON file, returning None when it does not exist."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        raise MalformedRecordError(path, str(e)) from e


def _parse_identity(path: Path, index: int, record: Any) -> PlayerIdentity:
    if not isinstance(record, dict):
        raise MalformedRecordError(path, f"entry {index} is not an object")
    raw_id = record.get("uuid")
    name = record.get("name")
    if not isinstance(raw_id, str) or not isinstance(name, str):
        raise MalformedRecordError(path, f"entry {index} needs string 'uuid' and 'name' fields")
    try:
        UUID(raw_id)
    except ValueError as e:
        raise MalformedRecordError(path, f"entry {index} has invalid uuid {raw_id!r}") from e
    return PlayerIdentity(id=raw_id, name=name)


class FileSystemStorage:
    """Read-only storage over the server's usercache and per-player JSON files.

    Every call re-reads the files so results always reflect the latest
    snapshot written by the game server.

    Attributes:
        roster_path: Path to ``usercache.json``.
        stats_dir: Directory of ``<uuid>.json`` statistics files.
        advancements_dir: Directory of ``<uuid>.json`` advancement files.
    """

    def __init__(self, roster_path: Path | str, stats_dir: Path | str, advancements_dir: Path | str) -> None:
        """Initialize the storage with its source locations.

        Args:
            roster_path: Path to the roster file.
            stats_dir: Base directory for statistics files.
            advancements_dir: Base directory for advancement files.
        """
        self.roster_path = Path(roster_path)
        self.stats_dir = Path(stats_dir)
        self.advancements_dir = Path(advancements_dir)

    @classmethod
    def from_settings(cls, settings: McStatsSettings) -> FileSystemStorage:
        """Create a storage from deployment settings."""
        return cls(
            roster_path=settings.usercache_path,
            stats_dir=settings.stats_dir,
            advancements_dir=settings.advancements_dir,
        )

    def load_roster(self) -> list[PlayerIdentity]:
        """Load identities from the roster file.

        Extra fields on roster entries (such as ``expiresOn``) are ignored.

        Returns:
            Identities in file order, or an empty list if the file is missing.

        Raises:
            MalformedRecordError: If the file is not a JSON array of
                ``{uuid, name}`` objects.
        """
        data = _read_json(self.roster_path)
        if data is None:
            logger.debug("Roster file not found", path=str(self.roster_path))
            return []
        if not isinstance(data, list):
            raise MalformedRecordError(self.roster_path, "roster is not a JSON array")
        return [_parse_identity(self.roster_path, index, record) for index, record in enumerate(data)]

    def read_stats(self, player_id: str) -> dict[str, Any] | None:
        """Read ``<stats_dir>/<player_id>.json``."""
        return self._read_record(self.stats_dir, player_id)

    def read_advancements(self, player_id: str) -> dict[str, Any] | None:
        """Read ``<advancements_dir>/<player_id>.json``."""
        return self._read_record(self.advancements_dir, player_id)

    def readiness(self) -> dict[str, bool]:
        """Check that both snapshot directories exist and the roster is readable."""
        return {
            "stats_dir": self.stats_dir.is_dir(),
            "advancements_dir": self.advancements_dir.is_dir(),
            "roster": not self.roster_path.exists() or self.roster_path.is_file(),
        }

    def _record_path(self, base_dir: Path, player_id: str) -> Path:
        return base_dir / f"{player_id}.json"

    def _read_record(self, base_dir: Path, player_id: str) -> dict[str, Any] | None:
        path = self._record_path(base_dir, player_id)
        data = _read_json(path)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise MalformedRecordError(path, "record is not a JSON object")
        return data
