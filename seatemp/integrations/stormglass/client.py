from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx
import structlog

from ...temperature.types import (
    CurrentTemperature,
    TemperaturePoint,
    TemperatureReading,
)
from ...utils import timed
from ..common import ConfigError, getenv, getenv_optional
from .exceptions import StormglassAPIError
from .types import PointResponse

logger = structlog.get_logger()

API_URL = "https://api.stormglass.io/v2/weather/point"

# Ngamotu beach, New Plymouth
NGAMOTU_COORDINATE = (-39.0556, 174.0452)

WATER_TEMPERATURE = "waterTemperature"
WINDOW = timedelta(hours=24)


def get_display_timezone() -> tzinfo | None:
    """
    Load the timezone used when formatting sample times. None means the
    local time of the server.
    """
    name = getenv_optional("STORMGLASS_DISPLAY_TIMEZONE")
    if not name:
        return None

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown timezone {name!r}") from e


def format_time(value: datetime, tz: tzinfo | None = None) -> str:
    """Format a timestamp as a 12 hour clock time, e.g. 03:00 PM"""
    return value.astimezone(tz).strftime("%I:%M %p")


def to_reading(response: PointResponse, tz: tzinfo | None = None) -> TemperatureReading:
    """
    Normalize a Stormglass response. Sample order is preserved and the last
    sample is used as the current temperature.
    """
    if not response.hours:
        raise StormglassAPIError("Stormglass API returned no samples")

    history = [
        TemperaturePoint(
            temperature=hour.water_temperature.sg,
            time=format_time(hour.time, tz),
        )
        for hour in response.hours
    ]

    return TemperatureReading(
        current=CurrentTemperature(temperature=history[-1].temperature),
        history=history,
    )


class StormglassClient:
    """
    A client for loading water temperatures from the Stormglass API.

    The API key is read from STORMGLASS_API_KEY on the first request if it is
    not given explicitly, so a missing key is only reported when data is
    actually needed.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        coordinate: tuple[float, float] = NGAMOTU_COORDINATE,
        display_timezone: tzinfo | None = None,
    ) -> None:
        self.api_key = api_key
        self.coordinate = coordinate
        self.display_timezone = display_timezone
        self.client: httpx.AsyncClient | None = None

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
            self.client = None

    async def fetch_window(self) -> TemperatureReading:
        """
        Load water temperatures for the trailing 24 hours ending now.
        """
        end = datetime.now(UTC)
        start = end - WINDOW

        response = await self._get_point(
            params=WATER_TEMPERATURE, start=start, end=end
        )
        return to_reading(response, self.display_timezone)

    ###################
    # Context manager #
    ###################

    async def __aenter__(self) -> Self:
        if not self.client:
            self.client = httpx.AsyncClient()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    ####################
    # Internal helpers #
    ####################

    async def _get_point(
        self, *, params: str, start: datetime, end: datetime
    ) -> PointResponse:
        """
        Make an authenticated request to the point endpoint.
        """
        api_key = self.api_key or getenv("STORMGLASS_API_KEY")

        if not self.client:
            self.client = httpx.AsyncClient()

        latitude, longitude = self.coordinate

        try:
            with timed("Stormglass request", params=params):
                response = await self.client.get(
                    API_URL,
                    params={
                        "lat": latitude,
                        "lng": longitude,
                        "params": params,
                        "start": start.isoformat(timespec="seconds"),
                        "end": end.isoformat(timespec="seconds"),
                    },
                    headers={"Authorization": api_key},
                )
        except httpx.HTTPError as e:
            logger.error("Stormglass request failed", error=str(e))
            raise StormglassAPIError(
                f"Stormglass API request failed: {e}"
            ) from e

        if not response.is_success:
            logger.error(
                "Stormglass API error",
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise StormglassAPIError(
                f"Stormglass API error: {response.status_code}",
                status_code=response.status_code,
            )

        return PointResponse.model_validate_json(response.text)
