"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from api_composer.config import DEFAULT_BASE_URL, Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("API_COMPOSER_BASE_URL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.auth_supported is True
    assert settings.parsed_cors_origins() == ["*"]


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("API_COMPOSER_BASE_URL", "https://staging.example/api")
    monkeypatch.setenv("API_COMPOSER_AUTH_SUPPORTED", "false")
    settings = Settings(_env_file=None)

    assert settings.base_url == "https://staging.example/api"
    assert settings.auth_supported is False


def test_settings_are_read_only():
    settings = Settings(_env_file=None)

    with pytest.raises(PydanticValidationError):
        settings.base_url = "http://elsewhere"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
