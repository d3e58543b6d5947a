"""Tool registration helpers."""

import logging
from collections.abc import Mapping
from typing import Any

from toolspec.errors import UnknownToolError
from toolspec.tools.base import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    def __init__(self, tools: list[Tool] | None = None) -> None:
        self._tools: dict[str, Tool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: Tool) -> Tool:
        name = tool.name()
        if name in self._tools:
            logger.debug("Replacing tool %s (%r -> %r)", name, self._tools[name], tool)
        self._tools[name] = tool
        return tool

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def schemas(self) -> list[dict[str, object]]:
        return [
            {
                "name": name,
                "description": tool.description() or "",
                "parameters": tool.schema().to_json_schema(),
            }
            for name, tool in self._tools.items()
        ]

    def call(self, name: str, args: Mapping[Any, Any]) -> Any:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool.call(args)
