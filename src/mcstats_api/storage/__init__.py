"""Storage backends for mcstats-api."""

from __future__ import annotations

from mcstats_api.storage.base import StorageProtocol
from mcstats_api.storage.filesystem import FileSystemStorage
from mcstats_api.storage.memory import InMemoryStorage

__all__ = ["FileSystemStorage", "InMemoryStorage", "StorageProtocol"]
