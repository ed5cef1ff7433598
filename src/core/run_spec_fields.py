"""Field readers for run-spec steps.

Each reader validates one field of a step mapping and names the step in
its error so a bad script points straight at the offending line.
"""

from __future__ import annotations

from typing import Mapping

from core.errors import TrieStoreRunSpecError
from core.types import VALUE_TYPES_BY_NAME, supported_value_type_names


def required_key(fields: Mapping[str, object], context: str) -> str:
    """Read the non-empty string ``key`` field."""
    key = fields.get("key")
    if not isinstance(key, str) or not key:
        raise TrieStoreRunSpecError(f"Invalid {context}: 'key' must be a non-empty string.")
    return key


def required_value(fields: Mapping[str, object], context: str) -> object:
    """Read the ``value`` field; any YAML scalar or collection, including null."""
    if "value" not in fields:
        raise TrieStoreRunSpecError(f"Invalid {context}: missing required field 'value'.")
    return fields["value"]


def optional_version(fields: Mapping[str, object], context: str) -> int | None:
    """Read an optional integer ``version`` field."""
    version = fields.get("version")
    if version is None:
        return None
    if isinstance(version, bool) or not isinstance(version, int):
        raise TrieStoreRunSpecError(f"Invalid {context}: 'version' must be an integer.")
    return version


def optional_value_type(fields: Mapping[str, object], context: str) -> type | None:
    """Resolve an optional ``type`` name into a Python type."""
    type_name = fields.get("type")
    if type_name is None:
        return None
    if isinstance(type_name, str) and type_name in VALUE_TYPES_BY_NAME:
        return VALUE_TYPES_BY_NAME[type_name]
    raise TrieStoreRunSpecError(
        f"Invalid {context}: unsupported value type {type_name!r}. "
        f"Use one of: {', '.join(supported_value_type_names())}."
    )
