"""Seymour configuration.

Client settings loaded from environment variables with SEYMOUR_ prefix.

Example:
    >>> from seymour.core.config import get_settings
    >>> settings = get_settings(base_url="https://rss.example.com/api/greader.php")
    >>> settings.client
    'libseymour'
    >>> settings.request_timeout
    30.0
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CLIENT = "libseymour"


class Settings(BaseSettings):
    """Client settings.

    Loads from environment variables with SEYMOUR_ prefix.

    Example:
        >>> from seymour.core.config import Settings
        >>> s = Settings(base_url="https://example.com/api", client="my-app")
        >>> s.client
        'my-app'
    """

    model_config = SettingsConfigDict(
        env_prefix="SEYMOUR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    base_url: str | None = Field(default=None, description="Aggregator base URL")
    client: str = Field(default=DEFAULT_CLIENT, min_length=1, description="Client identifier sent with every request")

    # Credentials (optional; persisting tokens is up to the application)
    username: str | None = Field(default=None, description="Account username/email")
    password: str | None = Field(default=None, description="Account (API) password")
    auth_token: str | None = Field(default=None, description="Previously obtained auth token")

    # Transport
    request_timeout: float = Field(default=30.0, ge=1.0)
    user_agent: str = Field(default="Seymour/0.1", description="User-Agent header")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level for configure_logging()")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from seymour.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    return Settings(**overrides)
