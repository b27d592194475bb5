"""Common utility functions for integrations."""

import os

from .exceptions import ConfigError


def getenv(key: str) -> str:
    """
    Get a required environment variable.

    Raises ConfigError if the variable is not set or empty.
    """
    if value := os.getenv(key):
        return value

    raise ConfigError(f"Environment variable {key} not set")


def getenv_optional(key: str) -> str | None:
    return os.getenv(key) or None
