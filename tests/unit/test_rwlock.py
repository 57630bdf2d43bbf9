import threading
import time

import pytest

from jsonstorage.storage.rwlock import RWLock


def _wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def test_readers_share_the_lock():
    lock = RWLock()
    barrier = threading.Barrier(2, timeout=2)
    errors = []

    def reader():
        with lock.read_locked():
            try:
                # both readers must be inside at the same time
                barrier.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5)
    assert errors == []


def test_writer_excludes_readers():
    lock = RWLock()
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            acquired.set()

    lock.acquire_write()
    t = threading.Thread(target=reader)
    t.start()
    assert not acquired.wait(0.1)
    lock.release_write()
    assert acquired.wait(2)
    t.join(2)


def test_writer_waits_for_readers():
    lock = RWLock()
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()
    assert not acquired.wait(0.1)
    lock.release_read()
    assert acquired.wait(2)
    t.join(2)


def test_waiting_writer_goes_before_new_readers():
    lock = RWLock()
    order = []

    def writer():
        with lock.write_locked():
            order.append("w")

    def reader():
        with lock.read_locked():
            order.append("r")

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    assert _wait_until(lambda: lock._writers_waiting == 1)

    r = threading.Thread(target=reader)
    r.start()
    time.sleep(0.1)
    assert order == []

    lock.release_read()
    w.join(2)
    r.join(2)
    assert order == ["w", "r"]


def test_release_without_acquire():
    lock = RWLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_released_after_exception():
    lock = RWLock()
    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("x")
    with pytest.raises(ValueError):
        with lock.read_locked():
            raise ValueError("y")
    # both modes are free again
    with lock.write_locked():
        pass
