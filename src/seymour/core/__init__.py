"""Core configuration, credentials and errors."""

from seymour.core.config import Settings, get_settings
from seymour.core.credentials import Credentials
from seymour.core.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidArgumentError,
    SeymourError,
)
from seymour.core.logging_config import configure_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Credentials
    "Credentials",
    # Errors
    "SeymourError",
    "ApiError",
    "ConfigurationError",
    "InvalidArgumentError",
]
