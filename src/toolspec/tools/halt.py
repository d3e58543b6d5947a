"""Halt signal returned by tools that end the conversation loop."""

from dataclasses import dataclass
from typing import Any

from toolspec.messages import MessageSource, probe_metadata


@dataclass(frozen=True, slots=True)
class Halt:
    """Final content plus optional provider metadata.

    Returning a Halt from ``execute`` tells the caller to stop requesting
    further model turns and use ``content`` as the final output. Callers
    recognise it by type, see :func:`is_halt`.
    """

    content: Any
    input_tokens: int | None = None
    output_tokens: int | None = None
    model_id: str | None = None
    raw: Any = None

    @classmethod
    def from_message(cls, content: Any, message: MessageSource) -> "Halt":
        """Build a Halt whose metadata is read from ``message``.

        Each field is probed on its own, so partial messages (a dict with only
        ``model_id``, an object without ``raw``) are fine.
        """
        return cls(content, **probe_metadata(message))

    def with_metadata_from(self, message: MessageSource) -> "Halt":
        return type(self).from_message(self.content, message)

    def to_dict(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (
                ("content", self.content),
                ("input_tokens", self.input_tokens),
                ("output_tokens", self.output_tokens),
                ("model_id", self.model_id),
                ("raw", self.raw),
            )
            if value is not None
        }

    def __str__(self) -> str:
        return str(self.content)


def is_halt(result: object) -> bool:
    return isinstance(result, Halt)
