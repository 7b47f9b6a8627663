"""Unit tests for settings, startup checks and Logfire switches."""

from pathlib import Path

import pytest

from pinbook.config import AuthSettings, ObservabilitySettings, Settings
from pinbook.util.error import ConfigurationError
from pinbook.util.observability import should_send_to_logfire
from scripts.start_app import check_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PAGINATION__PAGE_SIZE", raising=False)
        settings = Settings(_env_file=None)

        assert settings.pagination.page_size == 6
        assert settings.uploads.max_width == 300
        assert settings.uploads.max_height == 500
        assert settings.uploads.directory == Path("uploads")

    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("PAGINATION__PAGE_SIZE", "12")
        monkeypatch.setenv("UPLOADS__DIRECTORY", "/srv/pinbook/uploads")

        settings = Settings(_env_file=None)

        assert settings.pagination.page_size == 12
        assert settings.uploads.directory == Path("/srv/pinbook/uploads")


class TestCheckSettings:
    """Tests for the startup safety check."""

    def test_default_secret_rejected_in_production(self):
        settings = Settings(_env_file=None, environment="production")

        with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
            check_settings(settings)

    def test_default_secret_allowed_in_development(self):
        check_settings(Settings(_env_file=None, environment="development"))

    def test_custom_secret_allowed_in_production(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            auth=AuthSettings(jwt_secret="s3cret"),
        )

        check_settings(settings)


class TestShouldSendToLogfire:
    """Tests for should_send_to_logfire."""

    @pytest.mark.parametrize(
        "token,explicit,expected",
        [
            (None, None, False),
            ("tok", None, True),
            ("tok", False, False),
            (None, True, True),
        ],
    )
    def test_switch(self, token, explicit, expected):
        settings = Settings(
            _env_file=None,
            observability=ObservabilitySettings(
                logfire_token=token, send_to_logfire=explicit
            ),
        )

        assert should_send_to_logfire(settings) is expected
