"""
Reader/writer lock for the in-memory employee store.

Many readers may hold the lock at the same time, but a writer holds it
alone: while a writer is active no reader or other writer can enter.
Waiting writers take precedence over newly arriving readers so that a
steady stream of list/get requests cannot starve create, update and
delete calls.

The lock is built on a single ``threading.Condition`` and is intended
for the worker threads on which FastAPI runs synchronous handlers.  It
is not reentrant.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Shared/exclusive lock with writer preference."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Block until no writer holds or is waiting for the lock."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until the lock is free of readers and writers."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Context manager holding the lock in shared mode."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Context manager holding the lock in exclusive mode."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """Number of threads currently holding the lock for reading."""
        with self._cond:
            return self._readers

    @property
    def is_write_locked(self) -> bool:
        """``True`` while a writer holds the lock."""
        with self._cond:
            return self._writer
