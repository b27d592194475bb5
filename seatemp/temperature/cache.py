"""
A single entry cache in front of the water temperature provider.

The cached reading is served until it is older than MAX_AGE, after which the
next call refreshes it. Concurrent callers that find the entry missing or
stale share one refresh instead of each hitting the provider.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import timedelta
from enum import StrEnum

import structlog

from .types import TemperatureReading

logger = structlog.get_logger()

MAX_AGE = timedelta(hours=2.4)


class CacheState(StrEnum):
    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"


class TemperatureCache:
    value: TemperatureReading | None
    fetched_at: float | None

    def __init__(
        self,
        fetch: Callable[[], Awaitable[TemperatureReading]],
        *,
        max_age: timedelta = MAX_AGE,
        serve_stale_on_error: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        :param fetch:                Loads a new reading from the provider
        :param max_age:              How long a reading is served without a refresh
        :param serve_stale_on_error: Return the old reading if a refresh fails
        :param clock:                Monotonic clock, in seconds
        """
        self.fetch = fetch
        self.max_age = max_age.total_seconds()
        self.serve_stale_on_error = serve_stale_on_error
        self.clock = clock
        self.value = None
        self.fetched_at = None
        self._refresh_task: asyncio.Task[TemperatureReading] | None = None

    def age(self) -> float | None:
        if self.fetched_at is None:
            return None
        return self.clock() - self.fetched_at

    @property
    def state(self) -> CacheState:
        age = self.age()
        if self.value is None or age is None:
            return CacheState.EMPTY
        if age < self.max_age:
            return CacheState.FRESH
        return CacheState.STALE

    def is_fresh(self) -> bool:
        return self.state is CacheState.FRESH

    async def get(self) -> TemperatureReading:
        """
        Get the cached reading, refreshing it first if it's missing or stale.

        Errors from the provider are propagated unless serve_stale_on_error
        is set and there is an old reading to fall back to.
        """
        if self.value is not None and self.is_fresh():
            logger.debug("Serving cached temperatures", age=round(self.age() or 0))
            return self.value

        if self._refresh_task is None:
            self._refresh_task = asyncio.create_task(self._refresh())

        try:
            # Shielded so a cancelled caller doesn't cancel the shared refresh
            return await asyncio.shield(self._refresh_task)
        except Exception:
            if self.serve_stale_on_error and self.value is not None:
                logger.warning("Refresh failed, serving stale temperatures")
                return self.value
            raise

    async def _refresh(self) -> TemperatureReading:
        started_at = self.clock()
        try:
            reading = await self.fetch()
        finally:
            self._refresh_task = None

        self.value = reading
        self.fetched_at = started_at
        logger.info("Refreshed temperatures", samples=len(reading.history))
        return reading
