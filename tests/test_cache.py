import pytest

from jobfinder.core.cache import TTLCache


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(clock=clock)


def test_get_before_expiry(cache):
    cache.set("jobs", ["a", "b"], 1)
    assert cache.get("jobs") == ["a", "b"]
    assert cache.has("jobs")


def test_entry_expires_and_is_counted(cache, clock):
    cache.set("jobs", "value", 1)
    assert cache.stats() == {"total": 1, "valid": 1, "expired": 0}

    clock.advance(1.5)

    assert cache.get("jobs") is None
    assert not cache.has("jobs")
    stats = cache.stats()
    assert stats["expired"] == 1
    assert stats["total"] == 0


def test_stale_entries_count_before_eviction(cache, clock):
    cache.set("a", 1, 1)
    cache.set("b", 2, 60)
    clock.advance(2)

    assert cache.stats() == {"total": 2, "valid": 1, "expired": 1}


def test_expiry_boundary_is_inclusive(cache, clock):
    cache.set("k", "v", 10)
    clock.advance(10)
    assert cache.get("k") == "v"


def test_get_missing_returns_none(cache):
    assert cache.get("missing") is None
    assert not cache.has("missing")


def test_set_overwrites(cache):
    cache.set("k", 1, 60)
    cache.set("k", 2, 60)
    assert cache.get("k") == 2
    assert cache.stats()["total"] == 1


def test_delete_and_clear(cache, clock):
    cache.set("a", 1, 1)
    cache.set("b", 2, 60)
    cache.delete("b")
    cache.delete("does-not-exist")
    assert cache.get("b") is None

    clock.advance(5)
    cache.get("a")
    assert cache.stats()["expired"] == 1

    cache.clear()
    assert cache.stats() == {"total": 0, "valid": 0, "expired": 0}


def test_falsy_values_are_cached(cache):
    cache.set("empty", [], 60)
    assert cache.get("empty") == []
    assert cache.has("empty")
