"""Unit tests for the reader/writer lock."""

from __future__ import annotations

import threading

import pytest

from store.rwlock import ReadWriteLock


def test_readers_share_the_lock() -> None:
    """Two readers should hold the lock at the same time."""
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=5)
    errors: list[BaseException] = []

    def reader() -> None:
        try:
            with lock.read_locked():
                both_inside.wait()
        except threading.BrokenBarrierError as error:
            errors.append(error)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert errors == []


def test_writer_waits_for_active_reader() -> None:
    """Exclusive access is granted only after readers leave."""
    lock = ReadWriteLock()
    events: list[str] = []
    lock.acquire_read()

    def writer() -> None:
        with lock.write_locked():
            events.append("write")

    thread = threading.Thread(target=writer)
    thread.start()
    thread.join(timeout=0.2)
    events.append("read-released")
    lock.release_read()
    thread.join(timeout=5)

    assert events == ["read-released", "write"]


def test_release_without_acquire_raises() -> None:
    """Unbalanced releases are programming errors."""
    lock = ReadWriteLock()

    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()

    with lock.write_locked():
        pass
