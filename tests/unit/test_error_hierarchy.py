"""Tests for error hierarchy."""

from toolspec.errors import (
    ConfigError,
    ToolError,
    ToolNotImplementedError,
    ToolspecError,
    UnknownToolError,
)


def test_hierarchy() -> None:
    assert issubclass(ToolError, ToolspecError)
    assert issubclass(ConfigError, ToolspecError)
    assert issubclass(UnknownToolError, ToolError)
    assert issubclass(ToolNotImplementedError, ToolError)
    assert issubclass(ToolNotImplementedError, NotImplementedError)


def test_retryable_default() -> None:
    assert ToolspecError("test").retryable is False
    assert ToolError("test").retryable is False
    assert UnknownToolError("x").retryable is False
    assert ToolError("test", retryable=True).retryable is True


def test_error_message() -> None:
    err = UnknownToolError("weather")
    assert str(err) == "unknown tool: weather"
    assert err.name == "weather"


def test_catch_as_toolspec_error() -> None:
    try:
        raise ToolNotImplementedError("missing execute")
    except ToolspecError as exc:
        assert str(exc) == "missing execute"
