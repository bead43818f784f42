"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.default_page_limit == 100
        assert settings.max_page_limit == 1000
        assert settings.is_development

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_api_base_url_trailing_slash_is_removed(self):
        settings = Settings(_env_file=None, api_base_url="http://shop.test/")

        assert settings.api_base_url == "http://shop.test"

    def test_default_page_limit_cannot_exceed_max(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_page_limit=50, max_page_limit=10)

    def test_default_page_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_page_limit=0)

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.is_production
        assert not settings.is_testing
