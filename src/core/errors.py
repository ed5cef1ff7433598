"""Trie store exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Lookups that find nothing never raise; these types cover precondition
violations and configuration failures only.
"""

from __future__ import annotations


class TrieStoreError(Exception):
    """Base exception for all trie store failures."""


class TrieStoreConfigError(TrieStoreError):
    """Raised for invalid runtime configuration."""


class TrieStoreKeyError(TrieStoreError):
    """Raised when a key is empty or has an unsupported type."""


class TrieStoreValueError(TrieStoreError):
    """Raised when a value does not match its declared value type."""


class TrieStoreRunSpecError(TrieStoreError):
    """Raised for invalid or unsupported run-spec content."""
