from sitebuilder.tenancy.cache import MISSING, MemoryCache


def test_entries_without_ttl_live_until_cleared(clock):
    cache = MemoryCache(clock=clock)
    cache.set("a", False)

    clock.advance(10_000)
    assert cache.get("a") is False

    cache.clear()
    assert cache.get("a") is MISSING


def test_ttl_entry_expires(clock):
    cache = MemoryCache(ttl=5, clock=clock)
    cache.set("a", 1)

    clock.advance(4.9)
    assert cache.get("a") == 1

    clock.advance(0.1)
    assert cache.get("a", default=None) is None
    assert len(cache) == 0


def test_clear_with_predicate_only_drops_matching_keys():
    cache = MemoryCache()
    cache.set("w1:hero", True)
    cache.set("w1:menu", False)
    cache.set("w2:hero", True)

    assert cache.clear(lambda key: key.startswith("w1:")) == 2
    assert cache.get("w1:hero") is MISSING
    assert cache.get("w2:hero") is True
