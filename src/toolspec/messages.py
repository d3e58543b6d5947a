"""Message contracts shared with provider integrations."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

METADATA_FIELDS = ("input_tokens", "output_tokens", "model_id", "raw")


class MessageLike(Protocol):
    """Optional usage metadata a provider message may expose.

    Every attribute is optional at runtime; readers probe each one
    independently and treat a missing attribute as ``None``.
    """

    input_tokens: int | None
    output_tokens: int | None
    model_id: str | None
    raw: Any


MessageSource = MessageLike | Mapping[str, Any] | None


@dataclass(slots=True)
class Message:
    role: str
    content: Any = ""
    tool_calls: list[dict[str, Any]] = field(default_factory=list)
    input_tokens: int | None = None
    output_tokens: int | None = None
    model_id: str | None = None
    raw: Any = None


def probe_metadata(message: MessageSource) -> dict[str, Any]:
    """Read the usage metadata fields from a message, field by field.

    Mappings are read with ``.get``; any other object with ``getattr``.
    Fields the message does not carry come back as ``None``.
    """
    if message is None:
        return dict.fromkeys(METADATA_FIELDS)
    if isinstance(message, Mapping):
        return {name: message.get(name) for name in METADATA_FIELDS}
    return {name: getattr(message, name, None) for name in METADATA_FIELDS}
