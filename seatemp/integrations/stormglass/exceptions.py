from ..common.exceptions import IntegrationAPIError


class StormglassAPIError(IntegrationAPIError):
    """Stormglass-specific API error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
