"""mcstats-api: a read-only Litestar API over a Minecraft server's player data.

Reports whether the game server is online and summarizes each known
player's statistics and advancements from the JSON snapshots the server
writes to disk.

Key Components:
    - Core Models: PlayerIdentity, PlayerSummary, LivenessStatus, Diet
    - Storage: FileSystemStorage, InMemoryStorage, StorageProtocol
    - Services: PlayerService (aggregation), StatusService (liveness probe)
    - Web: /status, /players, /health and /ready controllers
    - Plugin: McStatsPlugin for Litestar integration

Quick Start:
    >>> from litestar import Litestar
    >>> from mcstats_api import McStatsPlugin, McStatsConfig
    >>>
    >>> app = Litestar(plugins=[McStatsPlugin(McStatsConfig())])

Aggregating without a web server:
    >>> from mcstats_api import McStatsSettings, FileSystemStorage, PlayerService
    >>>
    >>> service = PlayerService(FileSystemStorage.from_settings(McStatsSettings()))
    >>> summaries = service.list_summaries()
"""

from __future__ import annotations

__version__ = "0.1.0"

from mcstats_api.config import McStatsSettings
from mcstats_api.core import Diet, FoodTier, LivenessStatus, PlayerIdentity, PlayerSummary
from mcstats_api.exceptions import MalformedRecordError, McStatsError
from mcstats_api.plugin import McStatsConfig, McStatsPlugin
from mcstats_api.services import PlayerService, StatusService, aggregate, classify, extract_names, probe
from mcstats_api.storage import FileSystemStorage, InMemoryStorage, StorageProtocol
from mcstats_api.web import HealthController, PlayersController, StatusController, create_router

__all__ = [
    "Diet",
    "FileSystemStorage",
    "FoodTier",
    "HealthController",
    "InMemoryStorage",
    "LivenessStatus",
    "MalformedRecordError",
    "McStatsConfig",
    "McStatsError",
    "McStatsPlugin",
    "McStatsSettings",
    "PlayerIdentity",
    "PlayerService",
    "PlayerSummary",
    "PlayersController",
    "StatusController",
    "StatusService",
    "StorageProtocol",
    "aggregate",
    "classify",
    "create_router",
    "extract_names",
    "probe",
]
