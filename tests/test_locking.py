"""Tests for the readers-writer lock and concurrent registry use.

Run with: pytest tests/test_locking.py -v
"""

import threading
import time

import pytest

from conftest import ts
from reldate.periods import new_period_registry
from reldate.times import DEFAULT_TIME_FORMATTER, CalendarRule, new_time_registry
from reldate.utils.locking import ReadWriteLock

TIMEOUT = 5.0


class TestReadWriteLock:

    def test_readers_share(self):
        """Several readers hold the lock at once"""
        lock = ReadWriteLock()
        barrier = threading.Barrier(3, timeout=TIMEOUT)
        seen = []

        def reader():
            with lock.read():
                barrier.wait()
                seen.append(lock.readers)
                barrier.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(TIMEOUT)

        assert seen == [3, 3, 3]
        assert lock.readers == 0

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        entered = threading.Event()

        lock.acquire_write()
        assert lock.write_locked

        def reader():
            with lock.read():
                entered.set()

        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(0.1)

        lock.release_write()
        assert entered.wait(TIMEOUT)
        t.join(TIMEOUT)
        assert not lock.write_locked

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        written = threading.Event()

        lock.acquire_read()

        def writer():
            with lock.write():
                written.set()

        t = threading.Thread(target=writer)
        t.start()
        assert not written.wait(0.1)

        lock.release_read()
        assert written.wait(TIMEOUT)
        t.join(TIMEOUT)

    def test_waiting_writer_blocks_new_readers(self):
        """Readers arriving after a waiting writer queue behind it"""
        lock = ReadWriteLock()
        order = []

        lock.acquire_read()

        def writer():
            with lock.write():
                order.append("writer")

        def late_reader():
            with lock.read():
                order.append("reader")

        w = threading.Thread(target=writer)
        w.start()
        # Wait until the writer is queued
        deadline = time.monotonic() + TIMEOUT
        while lock._waiting_writers == 0 and time.monotonic() < deadline:
            time.sleep(0.001)

        r = threading.Thread(target=late_reader)
        r.start()
        time.sleep(0.05)
        assert order == []

        lock.release_read()
        w.join(TIMEOUT)
        r.join(TIMEOUT)
        assert order == ["writer", "reader"]

    def test_release_without_acquire(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_released_after_exception(self):
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write():
                raise ValueError("boom")
        assert not lock.write_locked
        with lock.read():
            assert lock.readers == 1


class TestConcurrentRegistries:
    """Smoke tests: lookups and mutations from many threads"""

    def test_time_registry_under_contention(self):
        registry = new_time_registry()
        pivot = ts("2020-08-11 00:02:01", tz="UTC")
        errors = []

        def lookup():
            try:
                for _ in range(200):
                    t, ok = registry.make(pivot, "start prev week")
                    assert ok and t.time == ts("2020-08-03", tz="UTC")
            except Exception as e:  # collected for the main thread
                errors.append(e)

        def mutate():
            try:
                for i in range(50):
                    registry.extend([CalendarRule(f"custom {i}", lambda p: p)])
                    registry.set_formatter(None if i % 2 else DEFAULT_TIME_FORMATTER)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=lookup) for _ in range(4)]
        threads.append(threading.Thread(target=mutate))
        for t in threads:
            t.start()
        for t in threads:
            t.join(TIMEOUT * 4)

        assert errors == []
        assert "custom 49" in registry
        assert len(registry) == 25 + 50

    def test_period_registry_under_contention(self):
        registry = new_period_registry()
        pivot = ts("2020-08-11 00:02:01", tz="UTC")
        results = []

        def lookup():
            for _ in range(100):
                results.append(str(registry.require(pivot, "prev quart")))

        threads = [threading.Thread(target=lookup) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(TIMEOUT * 4)

        assert len(results) == 400
        assert set(results) == {"2020-04-01 00:00:00 — 2020-06-30 23:59:59"}
