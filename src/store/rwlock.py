"""Reader/writer lock for the snapshot history.

Many readers may hold the lock together; a writer holds it alone.
Waiting writers block new readers so appends are not starved.
"""

from __future__ import annotations

from contextlib import contextmanager
import threading
from typing import Iterator


class ReadWriteLock:
    """Writer-preferring shared/exclusive lock built on a condition variable."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers = 0
        self._writer_active = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Block until shared access is granted."""
        with self._condition:
            while self._writer_active or self._waiting_writers > 0:
                self._condition.wait()
            self._active_readers += 1

    def release_read(self) -> None:
        """Release shared access."""
        with self._condition:
            if self._active_readers == 0:
                raise RuntimeError("release_read called without a matching acquire_read")
            self._active_readers -= 1
            if self._active_readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        """Block until exclusive access is granted."""
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer_active or self._active_readers > 0:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writer_active = True

    def release_write(self) -> None:
        """Release exclusive access."""
        with self._condition:
            if not self._writer_active:
                raise RuntimeError("release_write called without a matching acquire_write")
            self._writer_active = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold shared access for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold exclusive access for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
