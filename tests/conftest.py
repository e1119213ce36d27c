"""Pytest configuration and fixtures for mcstats-api tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pytest
from litestar import Litestar
from litestar.testing import TestClient

from mcstats_api.app import create_app
from mcstats_api.config import McStatsSettings
from mcstats_api.core.models import PlayerIdentity
from mcstats_api.plugin import McStatsConfig
from mcstats_api.services.status import StatusService
from mcstats_api.storage.filesystem import FileSystemStorage

if TYPE_CHECKING:
    from pathlib import Path

ALICE_ID = "069a79f4-44e9-4726-a5be-fca90e38aaf5"
BOB_ID = "853c80ef-3c37-49fd-aa49-938b674adae6"

ALICE_STATS: dict[str, Any] = {
    "stats": {
        "minecraft:custom": {
            "minecraft:play_time": 72000,
            "minecraft:deaths": 3,
            "minecraft:walk_one_cm": 1000,
            "minecraft:sprint_one_cm": 2000,
            "minecraft:walk_under_water_one_cm": 30,
            "minecraft:walk_on_water_one_cm": 40,
            "minecraft:swim_one_cm": 500,
            "minecraft:boat_one_cm": 700,
            "minecraft:pig_one_cm": 999,
            "minecraft:horse_one_cm": 5000,
            "minecraft:bell_ring": 2,
        },
        "minecraft:used": {
            "minecraft:bread": 10,
            "minecraft:cooked_beef": 1,
            "minecraft:cooked_cod": 5,
            "minecraft:diamond_pickaxe": 300,
        },
        "minecraft:mined": {"minecraft:stone": 1200},
    },
    "DataVersion": 3953,
}

ALICE_ADVANCEMENTS: dict[str, Any] = {
    "minecraft:story/root": {"criteria": {"crafting_table": "2024-01-01 10:00:00 +0000"}, "done": True},
    "minecraft:story/mine_stone": {"criteria": {"stone": "2024-01-01 10:05:00 +0000"}, "done": True},
    "minecraft:nether/root": {"criteria": {}, "done": False},
    "minecraft:recipes/misc/bread": {"criteria": {"has_wheat": "2024-01-01 10:10:00 +0000"}, "done": True},
    "minecraft:adventure/kill_a_mob": {"criteria": {"minecraft:zombie": "2024-01-01 11:00:00 +0000"}, "done": True},
    "DataVersion": 3953,
}

BOB_STATS: dict[str, Any] = {
    "stats": {
        "minecraft:custom": {"minecraft:play_time": 200},
        "minecraft:used": {"minecraft:cookie": 2, "minecraft:apple": 5},
    },
    "DataVersion": 3953,
}

ROSTER: list[dict[str, Any]] = [
    {"name": "Alice", "uuid": ALICE_ID, "expiresOn": "2025-01-01 00:00:00 +0000"},
    {"name": "Bob", "uuid": BOB_ID, "expiresOn": "2025-01-01 00:00:00 +0000"},
]

EXPECTED_PLAYERS: list[dict[str, Any]] = [
    {
        "id": ALICE_ID,
        "name": "Alice",
        "playtimeTicks": 72000,
        "deaths": 3,
        "totalDistanceCm": 4270,
        "pigDistanceCm": 999,
        "boatDistanceCm": 700,
        "diet": "carnivore",
        "bellRings": 2,
        "advancementNames": ["root", "mine_stone", "kill_a_mob"],
    },
    {
        "id": BOB_ID,
        "name": "Bob",
        "playtimeTicks": 200,
        "deaths": 0,
        "totalDistanceCm": 0,
        "pigDistanceCm": 0,
        "boatDistanceCm": 0,
        "diet": "vegetarian",
        "bellRings": 0,
        "advancementNames": [],
    },
]


def write_json(path: Path, data: Any) -> None:
    """Write a JSON fixture file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


# Liveness probe fakes


@dataclass
class FakeSamplePlayer:
    """Stand-in for one entry of a status response's player sample."""

    name: str


@dataclass
class FakePlayers:
    """Stand-in for the players block of a status response."""

    online: int
    max: int
    sample: list[FakeSamplePlayer] | None = None


@dataclass
class FakeStatusResponse:
    """Stand-in for a status response."""

    players: FakePlayers


@dataclass
class FakeServer:
    """Server whose ``async_status`` returns a canned response or raises."""

    response: FakeStatusResponse | None = None
    error: BaseException | None = None
    calls: int = 0

    async def async_status(self) -> FakeStatusResponse:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@dataclass
class FakeLookup:
    """Replacement for ``JavaServer.async_lookup`` recording its calls."""

    server: FakeServer
    calls: list[tuple[str, float]] = field(default_factory=list)

    async def __call__(self, address: str, timeout: float) -> FakeServer:
        self.calls.append((address, timeout))
        return self.server


def online_lookup(online: int = 2, max_players: int = 20, names: list[str] | None = None) -> FakeLookup:
    """Build a lookup for a server that answers with the given players."""
    sample = [FakeSamplePlayer(name) for name in names] if names is not None else None
    response = FakeStatusResponse(players=FakePlayers(online=online, max=max_players, sample=sample))
    return FakeLookup(FakeServer(response=response))


def failing_lookup(error: BaseException) -> FakeLookup:
    """Build a lookup for a server whose status query fails."""
    return FakeLookup(FakeServer(error=error))


# Data fixtures


@pytest.fixture
def settings(tmp_path: Path) -> McStatsSettings:
    """Settings pointing at empty directories under tmp_path."""
    stats_dir = tmp_path / "stats"
    advancements_dir = tmp_path / "advancements"
    stats_dir.mkdir()
    advancements_dir.mkdir()
    return McStatsSettings(
        usercache_path=tmp_path / "usercache.json",
        stats_dir=stats_dir,
        advancements_dir=advancements_dir,
        server_address="mc.example.com",
        server_port=25565,
        status_timeout_ms=5000,
        fallback_max_players=40,
        skip_malformed=False,
    )


@pytest.fixture
def populated_settings(settings: McStatsSettings) -> McStatsSettings:
    """Settings whose directories hold the two-player fixture data."""
    write_json(settings.usercache_path, ROSTER)
    write_json(settings.stats_dir / f"{ALICE_ID}.json", ALICE_STATS)
    write_json(settings.advancements_dir / f"{ALICE_ID}.json", ALICE_ADVANCEMENTS)
    write_json(settings.stats_dir / f"{BOB_ID}.json", BOB_STATS)
    return settings


@pytest.fixture
def storage(populated_settings: McStatsSettings) -> FileSystemStorage:
    """Filesystem storage over the fixture data."""
    return FileSystemStorage.from_settings(populated_settings)


@pytest.fixture
def alice() -> PlayerIdentity:
    """Identity of the first fixture player."""
    return PlayerIdentity(id=ALICE_ID, name="Alice")


# App and client fixtures


@pytest.fixture
def lookup() -> FakeLookup:
    """Lookup for an online server with a hidden player sample."""
    return online_lookup(online=0, max_players=20, names=None)


@pytest.fixture
def app(populated_settings: McStatsSettings, lookup: FakeLookup) -> Litestar:
    """Create the full application over fixture data and a fake server."""
    return create_app(
        plugin_config=McStatsConfig(
            settings=populated_settings,
            status_service=StatusService.from_settings(populated_settings, lookup=lookup),
        ),
    )


@pytest.fixture
def client(app: Litestar) -> TestClient[Litestar]:
    """Create a test client for the app."""
    return TestClient(app=app)
