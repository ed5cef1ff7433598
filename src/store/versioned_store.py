"""Multi-version trie store.

This module keeps an append-only history of trie snapshots. Readers can
query any version concurrently while writes are serialized into one total
order, each building on the snapshot committed before it.
"""

from __future__ import annotations

import threading
from typing import TypeVar, overload

from core.config import TrieStoreConfig
from core.constants import INITIAL_VERSION
from core.logging_config import get_logger
from core.types import WriteOperation
from store.rwlock import ReadWriteLock
from store.value_guard import ValueGuard
from trie.keys import TrieKey
from trie.trie import Trie

T = TypeVar("T")


class VersionedStore:
    """Thread-safe versioned wrapper around persistent tries.

    Version numbers are positions in the snapshot history. Version 0 is
    the empty trie and numbers are never reused.
    """

    def __init__(self, config: TrieStoreConfig | None = None) -> None:
        """Create a store holding only the empty snapshot.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or TrieStoreConfig.from_env()
        # Serializes writers end to end.
        self._write_lock = threading.Lock()
        # Guards the history list itself.
        self._snapshots_lock = ReadWriteLock()
        self._snapshots: list[Trie] = [Trie()]
        self._logger = get_logger(__name__, self._config)
        self._logger.debug("store_created", version=INITIAL_VERSION)

    @property
    def config(self) -> TrieStoreConfig:
        """Runtime configuration used by this store."""
        return self._config

    @overload
    def get(
        self, key: TrieKey, value_type: type[T], version: int | None = None
    ) -> ValueGuard[T] | None: ...

    @overload
    def get(
        self, key: TrieKey, value_type: None = None, version: int | None = None
    ) -> ValueGuard[object] | None: ...

    def get(
        self,
        key: TrieKey,
        value_type: type | None = None,
        version: int | None = None,
    ) -> ValueGuard | None:
        """Look up a key in one snapshot.

        Args:
            key: Key to look up.
            value_type: Exact stored type required, or None for any type.
            version: Snapshot version; latest when omitted.

        Returns:
            Guard bound to the snapshot, or None when the version is out of
            range, the key is absent, or the stored type does not match.
        """
        resolved = self._resolve(version)
        if resolved is None:
            return None
        resolved_version, snapshot = resolved
        stored = snapshot.lookup(key, value_type)
        if stored is None:
            return None
        return ValueGuard(snapshot=snapshot, value=stored.value, version=resolved_version)

    def snapshot(self, version: int | None = None) -> Trie | None:
        """Return the trie committed at ``version``, latest when omitted.

        Returns:
            Snapshot trie, or None when the version is out of range.
        """
        resolved = self._resolve(version)
        return None if resolved is None else resolved[1]

    def put(self, key: TrieKey, value: object, value_type: type | None = None) -> int:
        """Store a value under ``key`` in a new version.

        Args:
            key: Non-empty key.
            value: Payload to store.
            value_type: Declared type tag, defaults to ``type(value)``.

        Returns:
            Version number of the committed snapshot.

        Raises:
            TrieStoreKeyError: If key is empty or has an unsupported type.
            TrieStoreValueError: If value does not match value_type.
        """
        with self._write_lock:
            latest = self._latest_snapshot()
            updated = latest.put(key, value, value_type)
            return self._commit(updated, "put", key)

    def remove(self, key: TrieKey) -> int:
        """Remove ``key`` in a new version.

        Removing an absent key leaves the history untouched.

        Args:
            key: Non-empty key.

        Returns:
            Version number of the committed snapshot, or the current latest
            version when nothing was removed.

        Raises:
            TrieStoreKeyError: If key is empty or has an unsupported type.
        """
        with self._write_lock:
            latest = self._latest_snapshot()
            updated = latest.remove(key)
            if updated is latest:
                version = self.latest_version()
                self._logger.debug("remove_skipped", key=_key_label(key), version=version)
                return version
            return self._commit(updated, "remove", key)

    def latest_version(self) -> int:
        """Return the newest committed version number."""
        with self._snapshots_lock.read_locked():
            return len(self._snapshots) - 1

    def __len__(self) -> int:
        with self._snapshots_lock.read_locked():
            return len(self._snapshots)

    def _latest_snapshot(self) -> Trie:
        with self._snapshots_lock.read_locked():
            return self._snapshots[-1]

    def _resolve(self, version: int | None) -> tuple[int, Trie] | None:
        with self._snapshots_lock.read_locked():
            if version is None:
                version = len(self._snapshots) - 1
            if version < 0 or version >= len(self._snapshots):
                return None
            return version, self._snapshots[version]

    def _commit(self, snapshot: Trie, operation: WriteOperation, key: TrieKey) -> int:
        with self._snapshots_lock.write_locked():
            self._snapshots.append(snapshot)
            version = len(self._snapshots) - 1
        self._logger.info(
            "version_committed",
            operation=operation,
            key=_key_label(key),
            version=version,
        )
        return version


def _key_label(key: TrieKey) -> str:
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).hex()
    return str(key)
