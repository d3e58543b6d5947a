"""Tool parameter declarations."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Parameter:
    """One named argument a tool's ``execute`` accepts.

    ``type`` is a schema hint only; no value is ever checked against it.
    Fields are accepted as given, including an empty name.
    """

    name: str
    type: str = "string"
    description: str | None = None
    required: bool = True

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.description is not None:
            schema["description"] = self.description
        return schema
