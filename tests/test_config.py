"""Settings: environment loading, URL normalization, fatal missing credentials."""

import pytest

from crm_bridge.config import get_settings, load_settings
from crm_bridge.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CRM_BASE_URL", "https://crm.example.com/api/")
    monkeypatch.setenv("CRM_USERNAME", "user")
    monkeypatch.setenv("CRM_PASSWORD", "pass")
    settings = load_settings()
    assert settings.crm_base_url == "https://crm.example.com/api"
    assert settings.crm_username == "user"
    assert settings.crm_timeout_seconds == 30.0
    assert settings.log_format == "json"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_missing_password_is_configuration_error(monkeypatch):
    monkeypatch.delenv("CRM_PASSWORD", raising=False)
    with pytest.raises(ConfigurationError) as exc:
        load_settings()
    assert "CRM_PASSWORD" in exc.value.message
    assert exc.value.fields == ["CRM_PASSWORD"]


def test_blank_username_rejected(monkeypatch):
    monkeypatch.setenv("CRM_USERNAME", "   ")
    with pytest.raises(ConfigurationError) as exc:
        load_settings()
    assert "CRM_USERNAME" in exc.value.fields


def test_base_url_needs_scheme(monkeypatch):
    monkeypatch.setenv("CRM_BASE_URL", "crm.example.com")
    with pytest.raises(ConfigurationError):
        load_settings()
