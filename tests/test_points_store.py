import threading
import uuid

import pytest

from common.store.points import InMemoryPointsStore


def test_put_and_get(store: InMemoryPointsStore):
    store.put("abc", 28)
    assert store.get("abc") == 28
    assert "abc" in store
    assert len(store) == 1


def test_get_missing_returns_none(store: InMemoryPointsStore):
    assert store.get(str(uuid.uuid4())) is None


def test_entries_are_write_once(store: InMemoryPointsStore):
    store.put("abc", 28)
    with pytest.raises(ValueError):
        store.put("abc", 99)
    assert store.get("abc") == 28


def test_negative_points_rejected(store: InMemoryPointsStore):
    with pytest.raises(ValueError):
        store.put("abc", -1)
    assert "abc" not in store


def test_concurrent_puts(store: InMemoryPointsStore):
    ids = [str(uuid.uuid4()) for _ in range(200)]

    def worker(chunk):
        for i, receipt_id in chunk:
            store.put(receipt_id, i)

    pairs = list(enumerate(ids))
    threads = [threading.Thread(target=worker, args=(pairs[n::4],)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 200
    assert all(store.get(receipt_id) == i for i, receipt_id in pairs)
