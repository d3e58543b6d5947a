import pytest
from pydantic import ValidationError

from toolspec.config import Settings, get_settings, validate_settings
from toolspec.errors import ConfigError


def test_defaults() -> None:
    settings = get_settings()
    assert settings.app_env == "dev"
    assert settings.log_level == "INFO"
    assert settings.tool_log_max_chars == 2000
    assert "api_key" in settings.redact_keys()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("TOOL_LOG_MAX_CHARS", "0")
    monkeypatch.setenv("TOOL_LOG_REDACT_KEYS", " Token , ,PIN")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.app_env == "prod"
    assert settings.tool_log_max_chars == 0
    assert settings.redact_keys() == frozenset({"token", "pin"})


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_negative_log_limit_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOOL_LOG_MAX_CHARS", "-1")
    with pytest.raises(ValidationError):
        Settings()


def test_validate_settings_accepts_known_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    validate_settings(Settings())


def test_validate_settings_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        validate_settings(Settings())
