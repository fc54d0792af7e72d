"""
Source-literal rendering and builtin type detection.

Defaults and constant values live in the model as plain Python values;
this module decides which of them have a literal source form.
"""

from __future__ import annotations

from typing import Any

from ..utils.exceptions import UnsupportedValueError

BUILTIN_TYPES = frozenset({
    "None", "bool", "int", "float", "complex", "str", "bytes", "bytearray",
    "list", "tuple", "dict", "set", "frozenset", "object", "type",
})

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


def is_builtin_type(type_name: str) -> bool:
    """Check whether ``type_name`` names a builtin type."""
    return type_name in BUILTIN_TYPES


def is_literal_value(value: Any) -> bool:
    """Check whether ``value`` round-trips through ``repr`` as a source literal."""
    if isinstance(value, _SCALAR_TYPES):
        return True
    if isinstance(value, (list, tuple, set, frozenset)):
        return all(is_literal_value(item) for item in value)
    if isinstance(value, dict):
        return all(is_literal_value(k) and is_literal_value(v) for k, v in value.items())
    return False


def export_value(value: Any) -> str:
    """
    Render ``value`` as Python source.

    Raises:
        UnsupportedValueError: If the value has no literal form
    """
    if not is_literal_value(value):
        raise UnsupportedValueError(value)
    if isinstance(value, float) and value != value:
        return "float('nan')"
    if isinstance(value, float) and value in (float("inf"), float("-inf")):
        return f"float('{value}')"
    if isinstance(value, frozenset):
        return f"frozenset({export_value(set(value))})" if value else "frozenset()"
    if isinstance(value, set) and not value:
        return "set()"
    if isinstance(value, (list, tuple, set, dict)):
        return _export_container(value)
    return repr(value)


def _export_container(value) -> str:
    if isinstance(value, dict):
        items = ", ".join(f"{export_value(k)}: {export_value(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, set):
        items = sorted(export_value(item) for item in value)
        return "{" + ", ".join(items) + "}"
    items = [export_value(item) for item in value]
    if isinstance(value, tuple):
        if len(items) == 1:
            return f"({items[0]},)"
        return "(" + ", ".join(items) + ")"
    return "[" + ", ".join(items) + "]"
