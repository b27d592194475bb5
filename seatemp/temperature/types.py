from pydantic import BaseModel, ConfigDict


class TemperaturePoint(BaseModel):
    temperature: float  # Degrees Celsius
    time: str  # Display formatted, e.g. "03:00 PM"

    model_config = ConfigDict(frozen=True)


class CurrentTemperature(BaseModel):
    temperature: float

    model_config = ConfigDict(frozen=True)


class TemperatureReading(BaseModel):
    """
    Water temperatures for the trailing 24 hours. History is oldest first and
    current is the most recent sample.
    """

    current: CurrentTemperature
    history: list[TemperaturePoint]


class ErrorResponse(BaseModel):
    error: str
