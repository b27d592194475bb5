from __future__ import annotations

import os
from collections.abc import AsyncIterator, Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest
from seatemp.server import app
from seatemp.temperature.cache import TemperatureCache
from seatemp.temperature.types import (
    CurrentTemperature,
    TemperaturePoint,
    TemperatureReading,
)
from tests.clock import FakeClock


def pytest_configure(config: pytest.Config) -> None:
    os.environ.setdefault("STORMGLASS_API_KEY", "test-api-key")


##############
# Stormglass #
##############


@pytest.fixture
def end_time() -> datetime:
    return datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def water_temperatures() -> list[float]:
    # 24 hourly samples rising from 18.0 to 19.3
    return [round(18.0 + i * 1.3 / 23, 2) for i in range(24)]


@pytest.fixture
def stormglass_payload(
    end_time: datetime, water_temperatures: list[float]
) -> dict[str, Any]:
    start = end_time - timedelta(hours=len(water_temperatures) - 1)
    return {
        "hours": [
            {
                "time": (start + timedelta(hours=i)).isoformat(),
                "waterTemperature": {"sg": value},
            }
            for i, value in enumerate(water_temperatures)
        ],
        "meta": {"cost": 1, "dailyQuota": 10, "requestCount": 1},
    }


###########
# Caching #
###########


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_reading() -> Callable[[float], TemperatureReading]:
    def _make_reading(temperature: float) -> TemperatureReading:
        return TemperatureReading(
            current=CurrentTemperature(temperature=temperature),
            history=[TemperaturePoint(temperature=temperature, time="12:00 PM")],
        )

    return _make_reading


########
# APIs #
########


@pytest.fixture
async def client() -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def install_cache() -> Iterator[Callable[[TemperatureCache], None]]:
    """
    The cache is normally created on startup, which isn't run for ASGI
    transport clients, so tests install their own.
    """

    def _install(cache: TemperatureCache) -> None:
        app.state.temperature_cache = cache

    try:
        yield _install
    finally:
        if hasattr(app.state, "temperature_cache"):
            del app.state.temperature_cache
