"""Base class for tools an agent can call by name."""

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from toolspec.config import get_settings
from toolspec.errors import ToolNotImplementedError
from toolspec.tools.halt import Halt
from toolspec.tools.naming import derive_name
from toolspec.tools.parameter import Parameter
from toolspec.tools.schema import ToolSchema

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"
TRUNCATED = "...[truncated]"


def _redact_value(value: Any, keys: frozenset[str]) -> Any:
    if isinstance(value, Mapping):
        return {
            key: REDACTED if _key_text(key).lower() in keys else _redact_value(nested, keys)
            for key, nested in value.items()
        }
    if isinstance(value, list):
        return [_redact_value(item, keys) for item in value]
    return value


def _clip(text: str, limit: int) -> str:
    if limit and len(text) > limit:
        return text[:limit] + TRUNCATED
    return text


def _key_text(key: object) -> str:
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


class Tool:
    """Base class for callable tools.

    Subclasses describe themselves at class level and implement ``execute``::

        class WeatherTool(Tool, description="Current weather for a city"):
            def execute(self, city: str) -> str:
                ...

        WeatherTool.param("city", description="City name")

    The schema (description and parameters) belongs to the class and is
    shared by every instance. A subclass starts from a copy of its parent's
    schema taken when the subclass is defined.

    ``name()`` is derived from the bare class name, without module or outer
    class, so tool class names must be unique across modules.
    """

    _schema: ToolSchema

    def __init_subclass__(cls, description: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._schema = cls._schema_for_class().copy()
        if description is not None:
            cls._schema.description = description

    @classmethod
    def _schema_for_class(cls) -> ToolSchema:
        for klass in cls.__mro__:
            schema = klass.__dict__.get("_schema")
            if schema is not None:
                return schema
        # Only reached for the base class before anything was declared on it.
        Tool._schema = ToolSchema()
        return Tool._schema

    @classmethod
    def description(cls, text: str | None = None) -> str | None:
        """Return the tool description, or store ``text`` as the new one."""
        schema = cls._schema_for_class()
        if text is None:
            return schema.description
        schema.description = text
        return None

    @classmethod
    def param(cls, name: str, **options: Any) -> Parameter:
        return cls._schema_for_class().declare(name, **options)

    @classmethod
    def parameters(cls) -> dict[str, Parameter]:
        return cls._schema_for_class().parameters

    @classmethod
    def schema(cls) -> ToolSchema:
        return cls._schema_for_class()

    def name(self) -> str:
        return derive_name(type(self).__name__)

    def call(self, args: Mapping[Any, Any]) -> Any:
        """Invoke ``execute`` with canonical keyword arguments.

        Returns whatever ``execute`` returns, a :class:`Halt` included.
        Exceptions raised by ``execute`` propagate unchanged.
        """
        settings = get_settings()
        name = self.name()
        if logger.isEnabledFor(logging.DEBUG):
            shown = _redact_value(dict(args), settings.redact_keys())
            logger.debug(
                "Tool %s called with: %s", name, _clip(repr(shown), settings.tool_log_max_chars)
            )
        result = self.execute(**self.canonical_arguments(args))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Tool %s returned: %s", name, _clip(repr(result), settings.tool_log_max_chars)
            )
        return result

    def canonical_arguments(self, args: Mapping[Any, Any]) -> dict[str, Any]:
        """Map incoming keys onto the keyword names ``execute`` accepts.

        Exact matches win, then case-insensitive ones. Declared parameter
        names only count when ``execute`` takes ``**kwargs``. Keys matching
        nothing are passed through as strings so ``execute`` reports the
        mismatch.
        """
        known = self._known_argument_names()
        folded: dict[str, str] = {}
        for known_name in known:
            folded.setdefault(known_name.casefold(), known_name)

        canonical: dict[str, Any] = {}
        for key, value in args.items():
            text = _key_text(key)
            if text not in known:
                text = folded.get(text.casefold(), text)
            canonical[text] = value
        return canonical

    def _known_argument_names(self) -> list[str]:
        # execute() keyword names come first; declared names only fill in
        # spellings execute() does not already accept under another case.
        try:
            signature = inspect.signature(self.execute)
        except (TypeError, ValueError):
            return list(self.parameters())
        names: list[str] = []
        accepts_any = False
        for parameter in signature.parameters.values():
            if parameter.kind is inspect.Parameter.VAR_KEYWORD:
                accepts_any = True
            elif parameter.kind in (
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                inspect.Parameter.KEYWORD_ONLY,
            ):
                names.append(parameter.name)
        if accepts_any:
            taken = {name.casefold() for name in names}
            names.extend(name for name in self.parameters() if name.casefold() not in taken)
        return names

    def execute(self, **kwargs: Any) -> Any:
        raise ToolNotImplementedError(f"{type(self).__name__} must implement execute()")

    def _halt(self, content: Any, **metadata: Any) -> Halt:
        """Signal the caller to stop the conversation with ``content``.

        For use by subclasses inside ``execute``.

        ``metadata`` accepts the :class:`Halt` fields ``input_tokens``,
        ``output_tokens``, ``model_id`` and ``raw``.
        """
        return Halt(content, **metadata)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name()!r}>"
