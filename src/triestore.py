"""Public SDK surface for the trie store.

This module provides a stable import path for library users.
It re-exports the persistent trie, the versioned store and their errors.
"""

from __future__ import annotations

from core.config import TrieStoreConfig
from core.errors import (
    TrieStoreConfigError,
    TrieStoreError,
    TrieStoreKeyError,
    TrieStoreValueError,
)
from core.logging_config import configure_logging
from store.value_guard import ValueGuard
from store.versioned_store import VersionedStore
from trie.node import StoredValue, TrieNode
from trie.trie import Trie

__all__ = [
    "StoredValue",
    "Trie",
    "TrieNode",
    "TrieStoreConfig",
    "TrieStoreConfigError",
    "TrieStoreError",
    "TrieStoreKeyError",
    "TrieStoreValueError",
    "ValueGuard",
    "VersionedStore",
    "configure_logging",
]
