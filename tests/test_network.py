"""Tests for reachability checks and location providers."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from yweather_getter.data import GeoPoint
from yweather_getter.location import FixedLocationProvider
from yweather_getter.network import AlwaysOnline, TcpNetworkMonitor


async def test_always_online() -> None:
    assert await AlwaysOnline().is_connected() is True


async def test_fixed_location_provider_returns_point() -> None:
    point = GeoPoint(latitude=35.67, longitude=139.77)
    assert await FixedLocationProvider(point).find_location() == point


async def test_fixed_location_provider_without_fix() -> None:
    assert await FixedLocationProvider(None).find_location() is None


class TestTcpNetworkMonitor:
    """Tests for TcpNetworkMonitor."""

    def test_requires_host(self) -> None:
        with pytest.raises(ValueError, match="without a host"):
            TcpNetworkMonitor("not-a-url")

    async def test_connected_when_connection_opens(self, monkeypatch: pytest.MonkeyPatch) -> None:
        writer = MagicMock()
        writer.wait_closed = AsyncMock()
        open_connection = AsyncMock(return_value=(MagicMock(), writer))
        monkeypatch.setattr(asyncio, "open_connection", open_connection)

        monitor = TcpNetworkMonitor("http://weather.test/forecastrss")

        assert await monitor.is_connected() is True
        open_connection.assert_awaited_once_with("weather.test", 80)
        writer.close.assert_called_once()

    async def test_explicit_port_is_used(self, monkeypatch: pytest.MonkeyPatch) -> None:
        writer = MagicMock()
        writer.wait_closed = AsyncMock()
        open_connection = AsyncMock(return_value=(MagicMock(), writer))
        monkeypatch.setattr(asyncio, "open_connection", open_connection)

        await TcpNetworkMonitor("https://weather.test:8443/x").is_connected()

        open_connection.assert_awaited_once_with("weather.test", 8443)

    async def test_disconnected_on_os_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            asyncio, "open_connection", AsyncMock(side_effect=OSError("unreachable"))
        )
        monitor = TcpNetworkMonitor("http://weather.test/forecastrss")
        assert await monitor.is_connected() is False
