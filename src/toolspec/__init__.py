"""Declarative tool contracts for LLM-driven agents."""

from toolspec.errors import ToolError, ToolNotImplementedError, ToolspecError, UnknownToolError
from toolspec.messages import Message
from toolspec.tools import Halt, Parameter, Tool, ToolRegistry, ToolSchema, derive_name, is_halt

__all__ = [
    "Halt",
    "Message",
    "Parameter",
    "Tool",
    "ToolError",
    "ToolNotImplementedError",
    "ToolRegistry",
    "ToolSchema",
    "ToolspecError",
    "UnknownToolError",
    "derive_name",
    "is_halt",
]
