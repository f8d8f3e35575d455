"""Application Configuration — defaults, env overrides, validation."""

import pytest
from pydantic import ValidationError

from signup.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SIGNUP_LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.service_name == "signup-api"
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_override(monkeypatch):
    monkeypatch.setenv("SIGNUP_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SIGNUP_LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_invalid_log_format_rejected(monkeypatch):
    monkeypatch.setenv("SIGNUP_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
