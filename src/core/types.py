"""Shared typed models.

This module defines the value-type name registry used by scripted
workflows so YAML scripts can request typed lookups by name.
"""

from __future__ import annotations

from typing import Literal, Mapping

WriteOperation = Literal["put", "remove"]

VALUE_TYPES_BY_NAME: Mapping[str, type] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "list": list,
    "dict": dict,
}


def supported_value_type_names() -> tuple[str, ...]:
    """Return value type names accepted by scripted operations."""
    return tuple(VALUE_TYPES_BY_NAME)
