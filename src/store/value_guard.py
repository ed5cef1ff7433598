"""Value guards returned by versioned lookups.

A guard keeps the snapshot that owns a value alive for as long as the
caller holds the guard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from trie.trie import Trie

T = TypeVar("T")


@dataclass(frozen=True)
class ValueGuard(Generic[T]):
    """Read-only view of a stored value bound to its snapshot.

    Attributes:
        snapshot: Trie that owns the value.
        value: Stored value, shared by reference with the snapshot.
        version: Version number of the snapshot in the store history.
    """

    snapshot: Trie
    value: T
    version: int
