from importlib import import_module
from pathlib import Path

from fastapi import FastAPI

from .integrations.stormglass.client import StormglassClient, get_display_timezone
from .temperature.cache import TemperatureCache
from .temperature.dependencies import Cache

app = FastAPI()


def load_apps(path: Path) -> None:
    for api_module in path.glob("*/api.py"):

        # Construct the name of the module
        relative_path = api_module.relative_to(Path(__file__).parent)
        module_path = ".".join(p.name for p in reversed(relative_path.parents))
        module_name = f"{module_path}.{api_module.stem}"

        # Register the module
        module = import_module(module_name, package="seatemp")
        if router := getattr(module, "router", None):
            app.include_router(router)


load_apps(Path(__file__).parent)
load_apps(Path(__file__).parent / "integrations")


@app.on_event("startup")
async def startup() -> None:
    client = StormglassClient(display_timezone=get_display_timezone())
    app.state.stormglass_client = client
    app.state.temperature_cache = TemperatureCache(client.fetch_window)


@app.on_event("shutdown")
async def shutdown() -> None:
    await app.state.stormglass_client.close()


@app.get("/health")
async def get_health(cache: Cache) -> dict:
    return {"status": "pass", "cache": cache.state}
