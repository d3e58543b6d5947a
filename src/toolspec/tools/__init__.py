"""Declarative tools, the halt signal and the registry that dispatches them."""

from toolspec.tools.base import Tool
from toolspec.tools.halt import Halt, is_halt
from toolspec.tools.naming import derive_name
from toolspec.tools.parameter import Parameter
from toolspec.tools.registry import ToolRegistry
from toolspec.tools.schema import ToolSchema

__all__ = [
    "Halt",
    "Parameter",
    "Tool",
    "ToolRegistry",
    "ToolSchema",
    "derive_name",
    "is_halt",
]
