"""Common utilities for integrations."""

from .exceptions import ConfigError, IntegrationAPIError, UpstreamError
from .utils import getenv, getenv_optional

__all__ = [
    "ConfigError",
    "IntegrationAPIError",
    "UpstreamError",
    "getenv",
    "getenv_optional",
]
