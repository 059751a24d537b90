"""Tests for seymour.core - config, credentials, errors, logging."""

from __future__ import annotations

import logging

import pytest

from seymour.core.config import Settings, get_settings
from seymour.core.credentials import Credentials
from seymour.core.exceptions import ApiError, InvalidArgumentError, SeymourError
from seymour.core.logging_config import configure_logging


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.client == "libseymour"
        assert s.request_timeout == 30.0

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEYMOUR_BASE_URL", "https://rss.example.com")
        monkeypatch.setenv("SEYMOUR_CLIENT", "env-app")
        s = get_settings()
        assert s.base_url == "https://rss.example.com"
        assert s.client == "env-app"

    def test_overrides(self) -> None:
        assert get_settings(request_timeout=5.0).request_timeout == 5.0


class TestCredentials:
    def test_empty(self) -> None:
        creds = Credentials()
        assert creds.auth_token is None
        assert creds.post_token is None
        assert creds.auth_header() is None

    def test_header_scheme(self) -> None:
        creds = Credentials(auth_token="abc")
        assert creds.auth_header() == {"Authorization": "GoogleLogin auth=abc"}


class TestExceptions:
    def test_api_error(self) -> None:
        err = ApiError("Unauthorized", 401)
        assert err.status == 401
        assert err.body == "Unauthorized"
        assert str(err) == "Unauthorized"
        assert isinstance(err, SeymourError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, SeymourError)


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self) -> None:
        logger = configure_logging("debug")
        configure_logging("debug")
        assert logger.name == "seymour"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        logger.handlers = []
