from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WaterTemperature(BaseModel):
    sg: float


class Hour(BaseModel):
    time: datetime
    water_temperature: WaterTemperature = Field(alias="waterTemperature")

    model_config = ConfigDict(populate_by_name=True)


class PointResponse(BaseModel):
    """Response from the /weather/point endpoint. Extra keys like meta are ignored."""

    hours: list[Hour]
