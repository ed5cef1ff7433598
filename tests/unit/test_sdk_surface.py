"""Unit tests for the public SDK import surface."""

from __future__ import annotations

import triestore


def test_sdk_exports_store_and_trie() -> None:
    """The SDK module should expose the primary types."""
    store = triestore.VersionedStore(triestore.TrieStoreConfig(log_level="WARNING"))
    version = store.put("cat", 1)

    guard = store.get("cat", int, version)

    assert isinstance(guard, triestore.ValueGuard)
    assert isinstance(guard.snapshot, triestore.Trie)
    assert guard.value == 1
    assert issubclass(triestore.TrieStoreKeyError, triestore.TrieStoreError)
