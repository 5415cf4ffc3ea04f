import logging

from algopractice.lru import LRUCache


def test_source_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4
    assert len(cache) == 2


def test_missing_key():
    cache = LRUCache(1)
    assert cache.get(42) == -1
    assert len(cache) == 0


def test_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    cache.put(3, 30)
    assert cache.get(1) == 11
    assert cache.get(2) == -1
    assert cache.get(3) == 30


def test_update_does_not_grow():
    cache = LRUCache(2)
    cache.put(5, 1)
    cache.put(5, 2)
    assert len(cache) == 1
    assert cache.get(5) == 2


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert [cache.get(k) for k in (7, 8, 9)] == [14, 16, 18]


def test_zero_capacity_keeps_nothing():
    cache = LRUCache(0)
    cache.put(1, 1)
    assert len(cache) == 0
    assert cache.get(1) == -1


def test_eviction_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="algopractice.lru")
    cache = LRUCache(1)
    cache.put(1, 100)
    cache.put(2, 200)
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("[D]") and "1" in m and "100" in m for m in messages)
    assert sum(m.startswith("[C]") for m in messages) == 2