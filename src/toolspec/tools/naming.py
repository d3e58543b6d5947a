"""Wire-safe tool names derived from class names."""

import re
import unicodedata

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_-]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SUFFIX = "_tool"


def derive_name(type_name: str) -> str:
    """Map a class name to the identifier advertised to providers.

    >>> derive_name("WeatherTool")
    'weather'
    >>> derive_name("HTTPRequestTool")
    'http_request'
    >>> derive_name("GetUserProfile")
    'get_user_profile'

    Providers dispatch tool calls on this value, so the transform must stay
    byte-for-byte stable.
    """
    decomposed = unicodedata.normalize("NFKD", type_name)
    ascii_only = decomposed.encode("ascii", "ignore").decode("ascii")
    name = _UNSAFE_CHARS.sub("-", ascii_only)
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    name = name.lower()
    if name.endswith(_SUFFIX):
        name = name[: -len(_SUFFIX)]
    return name
