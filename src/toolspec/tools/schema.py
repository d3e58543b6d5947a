"""Per-class tool schema storage."""

from dataclasses import dataclass, field
from typing import Any

from toolspec.tools.parameter import Parameter


@dataclass(slots=True)
class ToolSchema:
    description: str | None = None
    parameters: dict[str, Parameter] = field(default_factory=dict)

    def declare(self, name: str, **options: Any) -> Parameter:
        # Re-declaring a name replaces the entry but keeps its original position.
        parameter = Parameter(name, **options)
        self.parameters[name] = parameter
        return parameter

    def copy(self) -> "ToolSchema":
        return ToolSchema(description=self.description, parameters=dict(self.parameters))

    def required_names(self) -> list[str]:
        return [name for name, parameter in self.parameters.items() if parameter.required]

    def to_json_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                name: parameter.to_schema() for name, parameter in self.parameters.items()
            },
            "required": self.required_names(),
        }
