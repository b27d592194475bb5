from typing import Annotated

from fastapi import Depends, Request

from .cache import TemperatureCache


def get_temperature_cache(request: Request) -> TemperatureCache:
    """The process wide cache, created when the server starts"""
    cache: TemperatureCache = request.app.state.temperature_cache
    return cache


Cache = Annotated[TemperatureCache, Depends(get_temperature_cache)]
