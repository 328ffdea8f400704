from datetime import datetime, timedelta, timezone

import pytest

from casino_eats.utils.cache import DataCache


class FakeClock:
    def __init__(self):
        self.now = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return DataCache(default_ttl=30, clock=clock)


def test_get_missing_key(cache):
    assert cache.get("orders_x") is None


def test_entry_is_fresh_before_ttl(cache, clock):
    cache.set("orders_x", [1, 2])
    clock.advance(29)

    assert cache.get("orders_x") == [1, 2]


def test_entry_is_stale_at_ttl(cache, clock):
    cache.set("orders_x", [1, 2])
    clock.advance(30)

    assert cache.get("orders_x") is None


def test_explicit_ttl_overrides_default(cache, clock):
    cache.set("orders_x", "data", ttl=5)
    clock.advance(6)

    assert cache.get("orders_x") is None


def test_clear_prefix_only_touches_matching_keys(cache):
    cache.set("orders_a", 1)
    cache.set("orders_b", 2)
    cache.set("products_all", 3)

    assert cache.clear_prefix("orders_") == 2
    assert cache.get("orders_a") is None
    assert cache.get("products_all") == 3


def test_set_sweeps_expired_entries_of_other_keys(cache, clock):
    for day in range(1, 6):
        cache.set(f"orders_2026-10-0{day}", [day])
    clock.advance(31)

    cache.set("orders_2026-10-18", [18])

    assert len(cache) == 1
    assert cache.get("orders_2026-10-18") == [18]


def test_sweep_keeps_fresh_entries(cache, clock):
    cache.set("orders_old", 1, ttl=5)
    cache.set("orders_new", 2, ttl=60)
    clock.advance(10)

    assert cache.sweep() == 1
    assert cache.get("orders_new") == 2
