"""Small, dependency-free helper functions used across the codebase."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Python type names accepted in place of value kind names.
_KIND_ALIASES: dict[str, str] = {
    "bool": "boolean",
    "int": "number",
    "float": "number",
    "str": "string",
    "dict": "object",
    "list": "object",
    "NoneType": "null",
    "none": "null",
}


def value_kind(value: Any) -> str:
    """Name the kind of a request value.

    Kinds follow the vocabulary of JSON-ish request payloads: ``boolean``,
    ``number``, ``string``, ``null``, ``function`` and ``object`` for
    everything else. ``bool`` is checked before ``int`` since it subclasses it.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def normalize_kind(name: str) -> str:
    """Map a Python type name alias to its value kind name."""
    return _KIND_ALIASES.get(name, name)


def read_member(container: Any, name: str) -> Any:
    """Read ``name`` as a key of a mapping or an attribute of an object."""
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)
