import logging

import pytest

from toolspec.config import get_settings

_SETTINGS_ENV = (
    "APP_ENV",
    "LOG_LEVEL",
    "TOOL_LOG_MAX_CHARS",
    "TOOL_LOG_REDACT_KEYS",
)


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="toolspec")
    return caplog
