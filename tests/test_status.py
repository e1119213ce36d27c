"""Tests for the liveness probe."""

from __future__ import annotations

import asyncio

import pytest

from mcstats_api.config import McStatsSettings
from mcstats_api.core.models import LivenessStatus
from mcstats_api.services.status import StatusService, probe
from tests.conftest import FakeServer, failing_lookup, online_lookup

OFFLINE = {"online": False, "playerCount": 0, "maxPlayers": 40, "onlineNames": []}


class TestProbe:
    """Tests for the probe function."""

    @pytest.mark.asyncio
    async def test_online_with_sample(self) -> None:
        """Counts and names come from the status response."""
        lookup = online_lookup(online=2, max_players=20, names=["Alice", "Bob"])
        status = await probe("mc", 25565, 5000, lookup=lookup)
        assert status.to_dict() == {
            "online": True,
            "playerCount": 2,
            "maxPlayers": 20,
            "onlineNames": ["Alice", "Bob"],
        }

    @pytest.mark.asyncio
    async def test_online_without_sample(self) -> None:
        """A hidden player sample is normal and yields no names."""
        lookup = online_lookup(online=5, max_players=40, names=None)
        status = await probe("mc", 25565, 5000, lookup=lookup)
        assert status.online is True
        assert status.player_count == 5
        assert status.online_names == []

    @pytest.mark.asyncio
    async def test_lookup_receives_address_and_timeout(self) -> None:
        """The lookup gets host:port and the timeout in seconds."""
        lookup = online_lookup()
        await probe("mc.example.com", 25566, 2500, lookup=lookup)
        assert lookup.calls == [("mc.example.com:25566", 2.5)]

    @pytest.mark.asyncio
    async def test_default_port_allows_srv_lookup(self) -> None:
        """On the default port only the host is passed so SRV records apply."""
        lookup = online_lookup()
        await probe("example.com", 25565, 5000, lookup=lookup)
        assert lookup.calls == [("example.com", 5.0)]

    @pytest.mark.asyncio
    async def test_timeout_returns_fallback(self) -> None:
        """A timed out query maps to the fixed offline payload."""
        status = await probe("mc", 25565, 5000, lookup=failing_lookup(TimeoutError()))
        assert status.to_dict() == OFFLINE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ConnectionRefusedError("refused"), OSError("no route to host"), OSError("Received invalid status response")],
    )
    async def test_failures_return_fallback(self, error: BaseException) -> None:
        """Any failure maps to the offline payload; nothing is raised."""
        status = await probe("mc", 25565, 5000, lookup=failing_lookup(error))
        assert status.to_dict() == OFFLINE

    @pytest.mark.asyncio
    async def test_lookup_failure_returns_fallback(self) -> None:
        """DNS or lookup errors are handled the same way."""

        async def lookup(address: str, timeout: float) -> FakeServer:
            raise ValueError("Invalid address")

        status = await probe("mc", 25565, 5000, lookup=lookup)
        assert status.to_dict() == OFFLINE

    @pytest.mark.asyncio
    async def test_slow_server_is_bounded_by_timeout(self) -> None:
        """A server slower than the timeout is reported offline."""

        class SlowServer:
            async def async_status(self) -> None:
                await asyncio.sleep(5)

        async def lookup(address: str, timeout: float) -> SlowServer:
            return SlowServer()

        status = await probe("mc", 25565, 20, lookup=lookup)
        assert status.to_dict() == OFFLINE

    @pytest.mark.asyncio
    async def test_single_attempt(self) -> None:
        """The probe never retries."""
        lookup = failing_lookup(TimeoutError())
        await probe("mc", 25565, 5000, lookup=lookup)
        assert len(lookup.calls) == 1
        assert lookup.server.calls == 1

    @pytest.mark.asyncio
    async def test_custom_fallback_max_players(self) -> None:
        """The offline maxPlayers value is configurable."""
        status = await probe("mc", 25565, 5000, fallback_max_players=10, lookup=failing_lookup(TimeoutError()))
        assert status == LivenessStatus(online=False, player_count=0, max_players=10, online_names=[])


class TestStatusService:
    """Tests for StatusService."""

    def test_from_settings(self, settings: McStatsSettings) -> None:
        """The service takes its target from settings."""
        service = StatusService.from_settings(settings)
        assert service.address == "mc.example.com"
        assert service.port == 25565
        assert service.timeout_ms == 5000
        assert service.fallback_max_players == 40

    @pytest.mark.asyncio
    async def test_probe_uses_configured_target(self, settings: McStatsSettings) -> None:
        """probe() queries the configured address."""
        lookup = online_lookup(online=1, max_players=8, names=["Alice"])
        service = StatusService.from_settings(settings, lookup=lookup)
        status = await service.probe()
        assert status.online_names == ["Alice"]
        assert lookup.calls == [("mc.example.com", 5.0)]

    @pytest.mark.asyncio
    async def test_probe_offline(self, settings: McStatsSettings) -> None:
        """Failures use the configured fallback."""
        service = StatusService.from_settings(settings, lookup=failing_lookup(ConnectionRefusedError()))
        assert (await service.probe()).to_dict() == OFFLINE
