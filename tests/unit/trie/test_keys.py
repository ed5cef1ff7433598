"""Unit tests for trie key normalization."""

from __future__ import annotations

import pytest

from core.errors import TrieStoreKeyError
from trie.keys import normalize_key, require_key


def test_normalize_key_maps_bytes_to_single_characters() -> None:
    """Every byte should become exactly one character."""
    chars = normalize_key(b"\x00\xffab")

    assert len(chars) == 4 and chars[1] == "\xff"


def test_normalize_key_rejects_unsupported_types() -> None:
    """Keys other than str or bytes should be rejected."""
    with pytest.raises(TrieStoreKeyError):
        normalize_key(42)  # type: ignore[arg-type]

    assert normalize_key("") == ""


def test_require_key_rejects_empty_key() -> None:
    """Write paths must not accept the empty key."""
    with pytest.raises(TrieStoreKeyError):
        require_key(b"")

    assert require_key("k") == "k"
