import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from jsonstorage.storage.file_backend import FileStorage
from jsonstorage.storage.memory_backend import MemoryStorage


@pytest.fixture(params=["file", "memory"])
def store(request, tmp_path):
    if request.param == "file":
        return FileStorage(tmp_path / "db", value_type=dict)
    return MemoryStorage(value_type=dict)


def test_concurrent_readers_get_consistent_values(store):
    value = {"name": "shared", "items": list(range(50))}
    store.put("shared", value)
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: store.get("Shared"), range(200)))
    assert all(r == value for r in results)


def test_concurrent_edits_are_not_lost(store):
    store.put("counter", {"n": 0})

    def bump(_):
        store.edit("counter", lambda v: {"n": v["n"] + 1})

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(bump, range(50)))
    assert store.get("counter") == {"n": 50}


def test_put_waits_for_running_range(store):
    store.put("a", {"n": 1})
    in_range = threading.Event()
    release = threading.Event()
    put_done = threading.Event()

    def visit(key, value):
        in_range.set()
        release.wait(5)

    def writer():
        store.put("b", {"n": 2})
        put_done.set()

    ranger = threading.Thread(target=store.range, args=(visit,))
    ranger.start()
    assert in_range.wait(5)

    w = threading.Thread(target=writer)
    w.start()
    # the writer is blocked while the range holds the shared lock
    assert not put_done.wait(0.2)

    release.set()
    ranger.join(5)
    w.join(5)
    assert put_done.is_set()
    assert store.get("b") == {"n": 2}


def test_concurrent_puts_to_distinct_keys(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: store.put(f"Key-{i}", {"i": i}), range(40)))
    assert sorted(store.keys()) == sorted(f"key-{i}" for i in range(40))
