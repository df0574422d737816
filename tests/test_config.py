"""
Tests for environment-driven settings
"""

import pytest
from pydantic import ValidationError

from library_catalog.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 4000
    assert settings.default_page_size == 10
    assert settings.default_sort_field == "title"
    assert settings.seed_on_startup is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CATALOG_API_PORT", "8080")
    monkeypatch.setenv("CATALOG_SEED_ON_STARTUP", "false")
    monkeypatch.setenv("CATALOG_CORS_ORIGINS", '["https://library.example"]')

    settings = Settings(_env_file=None)

    assert settings.api_port == 8080
    assert settings.seed_on_startup is False
    assert settings.cors_origins == ["https://library.example"]


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "warning")

    assert Settings(_env_file=None).log_level == "WARNING"


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("CATALOG_SUBSCRIBER_QUEUE_SIZE", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
