"""
Unit tests for the reader/writer lock.
"""

import threading
import time

import pytest

from employee_api.app.core.rwlock import ReadWriteLock


def _wait_until(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


class TestReadWriteLock:
    """Tests for ReadWriteLock."""

    def test_readers_share_lock(self):
        """Two readers can hold the lock at the same time."""
        lock = ReadWriteLock()
        barrier = threading.Barrier(2, timeout=2.0)
        errors = []

        def reader():
            try:
                with lock.read_locked():
                    barrier.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert errors == []
        assert lock.readers == 0

    def test_writer_blocks_reader(self):
        """A reader waits while a writer holds the lock."""
        lock = ReadWriteLock()
        entered = threading.Event()

        def reader():
            with lock.read_locked():
                entered.set()

        lock.acquire_write()
        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(0.1)

        lock.release_write()
        assert entered.wait(2.0)
        t.join(timeout=2.0)

    def test_reader_blocks_writer(self):
        """A writer waits until every reader has left."""
        lock = ReadWriteLock()
        entered = threading.Event()

        def writer():
            with lock.write_locked():
                entered.set()

        lock.acquire_read()
        t = threading.Thread(target=writer)
        t.start()
        assert not entered.wait(0.1)

        lock.release_read()
        assert entered.wait(2.0)
        t.join(timeout=2.0)
        assert not lock.is_write_locked

    def test_writers_are_exclusive(self):
        """Two writers never hold the lock together."""
        lock = ReadWriteLock()
        active = []
        overlaps = []

        def writer():
            for _ in range(50):
                with lock.write_locked():
                    active.append(1)
                    if len(active) > 1:
                        overlaps.append(len(active))
                    active.pop()

        threads = [threading.Thread(target=writer) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert overlaps == []

    def test_waiting_writer_goes_before_new_readers(self):
        """Readers arriving after a waiting writer queue behind it."""
        lock = ReadWriteLock()
        order = []

        def writer():
            with lock.write_locked():
                order.append("writer")
                time.sleep(0.05)

        def reader():
            with lock.read_locked():
                order.append("reader")

        lock.acquire_read()
        w = threading.Thread(target=writer)
        w.start()
        assert _wait_until(lambda: lock._waiting_writers == 1)

        r = threading.Thread(target=reader)
        r.start()
        time.sleep(0.05)
        assert order == []

        lock.release_read()
        w.join(timeout=2.0)
        r.join(timeout=2.0)

        assert order == ["writer", "reader"]

    def test_release_without_acquire(self):
        """Releasing a lock that is not held is an error."""
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_lock_released_on_exception(self):
        """Context managers release the lock when the body raises."""
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write_locked():
                raise ValueError("boom")
        assert not lock.is_write_locked

        with pytest.raises(ValueError):
            with lock.read_locked():
                raise ValueError("boom")
        assert lock.readers == 0
