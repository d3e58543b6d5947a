"""Toolspec exception hierarchy.

All toolspec-specific exceptions inherit from ToolspecError,
enabling structured error handling and cleaner catch clauses.
"""


class ToolspecError(Exception):
    """Base exception for all toolspec errors."""

    def __init__(self, message: str = "", *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class ToolError(ToolspecError):
    """Error raised by the tool layer."""


class ToolNotImplementedError(ToolError, NotImplementedError):
    """A tool class was invoked without overriding execute()."""


class UnknownToolError(ToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown tool: {name}")
        self.name = name


class ConfigError(ToolspecError):
    """Invalid or missing configuration."""
