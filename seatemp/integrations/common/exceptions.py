"""Common exception classes for integrations."""


class IntegrationAPIError(Exception):
    """Base exception for all integration API errors."""

    pass


# Any failure talking to an upstream data provider
UpstreamError = IntegrationAPIError


class ConfigError(Exception):
    """A required configuration value is missing."""

    pass
