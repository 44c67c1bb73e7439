import pytest

from app.core.cache import CacheStore
from app.core.errors import EntryNotFound

TTL_MS = 3_600_000


def test_put_then_get_returns_payload(market_cache):
    market_cache.put("technology", {"growth": 25, "skills": ["ML", "Cloud"]})
    assert market_cache.get("technology") == {"growth": 25, "skills": ["ML", "Cloud"]}


def test_get_before_put_is_not_found(market_cache):
    with pytest.raises(EntryNotFound):
        market_cache.get("healthcare")


def test_entries_stored_under_prefixed_key(market_cache, sql_kv, clock):
    clock.now = 1234
    market_cache.put("technology", {"growth": 25})
    assert sql_kv.get("market_trends_technology") == {
        "data": {"growth": 25},
        "timestamp": 1234,
        "ttl": TTL_MS,
    }


def test_expired_entry_is_evicted_on_read(market_cache, clock):
    market_cache.put("technology", {"growth": 25})
    clock.now = TTL_MS + 1
    assert market_cache.exists("technology")
    with pytest.raises(EntryNotFound):
        market_cache.get("technology")
    assert not market_cache.exists("technology")


def test_entry_valid_just_inside_ttl(market_cache, clock):
    market_cache.put("technology", {"growth": 25})
    clock.now = TTL_MS - 1
    assert market_cache.get("technology") == {"growth": 25}


def test_entry_valid_exactly_at_ttl(market_cache, clock):
    market_cache.put("technology", {"growth": 25})
    clock.now = TTL_MS
    assert market_cache.get("technology") == {"growth": 25}


def test_market_trends_technology_scenario(sql_kv, clock):
    cache = CacheStore(sql_kv, "", TTL_MS, clock=clock)
    cache.put("market_trends_technology", {"growth": 25})

    clock.now = 3_599_999
    assert cache.get("market_trends_technology") == {"growth": 25}

    clock.now = 3_600_001
    with pytest.raises(EntryNotFound):
        cache.get("market_trends_technology")


def test_put_overwrites_and_resets_timestamp(market_cache, clock):
    market_cache.put("technology", {"growth": 25})
    clock.now = TTL_MS
    market_cache.put("technology", {"growth": 30})
    clock.now = TTL_MS * 2
    assert market_cache.get("technology") == {"growth": 30}


def test_delete_is_idempotent(market_cache):
    market_cache.put("technology", {"growth": 25})
    market_cache.delete("technology")
    market_cache.delete("technology")
    with pytest.raises(EntryNotFound):
        market_cache.get("technology")


def test_falsy_payloads_round_trip(memory_kv, clock):
    cache = CacheStore(memory_kv, "market_trends_", TTL_MS, clock=clock)
    cache.put("empty", [])
    cache.put("zero", 0)
    assert cache.get("empty") == []
    assert cache.get("zero") == 0


def test_sweep_removes_only_stale_entries(market_cache, clock):
    market_cache.put("old", {"growth": 1})
    clock.now = 10
    market_cache.put("fresh", {"growth": 2})
    clock.now = TTL_MS + 5

    assert market_cache.sweep() == 1
    assert not market_cache.exists("old")
    assert market_cache.get("fresh") == {"growth": 2}


def test_negative_ttl_rejected(memory_kv):
    with pytest.raises(ValueError):
        CacheStore(memory_kv, "market_trends_", -1)
