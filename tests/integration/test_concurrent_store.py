"""Integration tests for concurrent readers and serialized writers."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from core.config import TrieStoreConfig
from store.versioned_store import VersionedStore

_WRITER_COUNT = 64
_READER_COUNT = 8


def test_concurrent_puts_produce_one_version_each() -> None:
    """Every concurrent put should commit exactly one distinct version."""
    store = VersionedStore(TrieStoreConfig(log_level="WARNING"))

    with ThreadPoolExecutor(max_workers=8) as pool:
        versions = list(pool.map(lambda index: store.put(f"key-{index}", index), range(_WRITER_COUNT)))

    assert sorted(versions) == list(range(1, _WRITER_COUNT + 1))
    assert store.latest_version() == _WRITER_COUNT


def test_each_version_applies_one_write_to_its_predecessor() -> None:
    """Version n should hold exactly the keys written by versions 1..n."""
    store = VersionedStore(TrieStoreConfig(log_level="WARNING"))

    with ThreadPoolExecutor(max_workers=8) as pool:
        versions = list(pool.map(lambda index: store.put(f"key-{index}", index), range(_WRITER_COUNT)))

    key_by_version = {version: f"key-{index}" for index, version in enumerate(versions)}
    for version in range(1, _WRITER_COUNT + 1):
        for earlier in range(1, _WRITER_COUNT + 1):
            guard = store.get(key_by_version[earlier], int, version)
            assert (guard is not None) == (earlier <= version)


def test_readers_see_fixed_version_while_writers_run() -> None:
    """Reads against a pinned version stay stable during concurrent writes."""
    store = VersionedStore(TrieStoreConfig(log_level="WARNING"))
    for index in range(16):
        store.put(f"base-{index}", index)
    pinned = store.latest_version()

    def read_all(_: int) -> list[int | None]:
        results = []
        for index in range(16):
            guard = store.get(f"base-{index}", int, pinned)
            results.append(None if guard is None else guard.value)
        return results

    def write(index: int) -> int:
        return store.put(f"base-{index % 16}", -index)

    with ThreadPoolExecutor(max_workers=_READER_COUNT + 4) as pool:
        reads = [pool.submit(read_all, index) for index in range(_READER_COUNT * 4)]
        writes = [pool.submit(write, index) for index in range(_WRITER_COUNT)]
        read_results = [future.result(timeout=30) for future in reads]
        write_results = [future.result(timeout=30) for future in writes]

    assert all(result == list(range(16)) for result in read_results)
    assert store.latest_version() == pinned + len(write_results)


def test_concurrent_removes_of_same_key_commit_once() -> None:
    """Only the first remove of a key advances the history."""
    store = VersionedStore(TrieStoreConfig(log_level="WARNING"))
    store.put("shared", 1)

    with ThreadPoolExecutor(max_workers=8) as pool:
        versions = list(pool.map(lambda _: store.remove("shared"), range(16)))

    assert set(versions) == {2}
    assert store.latest_version() == 2
