import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response

from .dependencies import Cache
from .types import ErrorResponse, TemperatureReading

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["temperature"])


@router.get(
    "/temperature",
    response_model=TemperatureReading,
    responses={500: {"model": ErrorResponse}},
)
async def get_temperature(cache: Cache) -> TemperatureReading | Response:
    """
    Get the current water temperature and the last 24 hours of history.
    """
    try:
        return await cache.get()
    except Exception as e:
        logger.exception("Failed to load temperatures")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(e)).model_dump(),
        )
