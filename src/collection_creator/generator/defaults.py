"""Placeholder values derived from declared types.

``resolve_default`` accepts Python annotations (``int``, ``list[str]``,
``Optional[bool]``, pydantic models, ...) as well as type names coming
from descriptor files (``"int"``, ``"Integer"``, ``"string"``,
``"list[int]"``, ``"int?"``). Types it does not recognize resolve to
None, which is written as JSON ``null``.
"""

import collections.abc
import inspect
import re
import types
from typing import Annotated, Any, Union, get_args, get_origin

from collection_creator.routes.base import Char

PRIMITIVE_DEFAULTS: dict[type, Any] = {
    int: 0,
    float: 0.0,
    bool: False,
    str: "",
    bytes: "",
}

# Keys are lower-cased, except for boxed names where case carries meaning.
PRIMITIVE_NAMES: dict[str, Any] = {
    "int": 0,
    "integer": 0,
    "long": 0,
    "short": 0,
    "byte": 0,
    "float": 0.0,
    "double": 0.0,
    "number": 0.0,
    "bool": False,
    "boolean": False,
    "char": "\u0000",
    "str": "",
    "string": "",
}
BOXED_NAMES = {"Integer", "Long", "Short", "Byte", "Float", "Double", "Boolean", "Character"}
SEQUENCE_NAMES = {"list", "array", "set", "tuple", "sequence", "collection"}
MAPPING_NAMES = {"dict", "map", "mapping"}

_GENERIC_NAME = re.compile(r"^(\w+)\s*\[.*\]$")
_OPTIONAL_NAME = re.compile(r"^optional\s*\[.*\]$", re.IGNORECASE)


def resolve_default(declared: Any) -> Any:
    """Return the placeholder value for a declared type, or None."""
    if isinstance(declared, str):
        return _resolve_name(declared.strip())
    return _resolve_annotation(declared)


def _resolve_annotation(tp: Any) -> Any:
    if tp is None:
        return None

    origin = get_origin(tp)
    if origin is Annotated:
        return _resolve_annotation(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        # Optional[X] and X | None are nullable; other unions are ambiguous.
        return None

    if tp is Char:
        return "\u0000"
    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return _resolve_annotation(supertype)

    if origin is None and inspect.isclass(tp) and tp in PRIMITIVE_DEFAULTS:
        return PRIMITIVE_DEFAULTS[tp]

    cls = origin or tp
    if not inspect.isclass(cls):
        return None
    try:
        if issubclass(cls, collections.abc.Mapping):
            return {}
        if issubclass(cls, (str, bytes)):
            return ""
        if issubclass(cls, (collections.abc.Sequence, collections.abc.Set)):
            return []
    except TypeError:
        pass
    return None


def _resolve_name(name: str) -> Any:
    if not name or name.endswith("?") or _OPTIONAL_NAME.match(name) or name in BOXED_NAMES:
        return None

    lowered = name.lower()
    if lowered in PRIMITIVE_NAMES:
        return PRIMITIVE_NAMES[lowered]

    match = _GENERIC_NAME.match(lowered)
    base = match.group(1) if match else lowered
    if base in SEQUENCE_NAMES:
        return []
    if base in MAPPING_NAMES:
        return {}
    return None
