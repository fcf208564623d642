"""Unit tests for service settings."""

import pytest

from calculator_service.config import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.service_name == "calculator-service"
        assert settings.port == 8080
        assert settings.cors_origins_list == ["*"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.port == 9000
        assert settings.log_level == "debug"

    def test_cors_origins_list_splits_on_commas(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
