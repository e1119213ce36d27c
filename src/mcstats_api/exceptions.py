"""Custom exceptions for mcstats-api."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class McStatsError(Exception):
    """Base exception class for all mcstats-api errors."""


class MalformedRecordError(McStatsError):
    """Raised when a roster, statistics or advancements file cannot be parsed.

    A missing file is never an error; this is only raised for files that
    exist but do not hold the expected JSON structure.

    Attributes:
        path: Location of the offending file.
        reason: Human readable description of what was wrong.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initialize the exception with the file location and reason.

        Args:
            path: Location of the offending file.
            reason: Description of why the content is malformed.
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Malformed record at {self.path}: {reason}")
