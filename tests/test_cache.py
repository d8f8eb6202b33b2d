import pytest

from geoplaces.cache import LRUCache


def payload(n):
    """A string value whose estimated size is 2 * (n + 2) bytes."""
    return 'x' * n


def test_estimate_size_uses_compact_json():
    assert LRUCache.estimate_size(payload(8)) == 20
    assert LRUCache.estimate_size({'a': 1}) == 14


def test_get_missing_returns_none():
    cache = LRUCache(100)
    assert cache.get('nope') is None


def test_set_then_get():
    cache = LRUCache(100)
    cache.set('a', {'country_a2': 'US'})
    assert cache.get('a') == {'country_a2': 'US'}
    assert cache.current_size == LRUCache.estimate_size({'country_a2': 'US'})


def test_evicts_least_recently_used():
    cache = LRUCache(60)  # room for three 20-byte entries
    for key in 'abc':
        cache.set(key, payload(8))

    cache.set('d', payload(8))
    assert 'a' not in cache
    assert [k for k in 'bcd' if k in cache] == ['b', 'c', 'd']


def test_get_promotes_entry():
    cache = LRUCache(60)
    for key in 'abc':
        cache.set(key, payload(8))

    cache.get('a')
    cache.set('d', payload(8))
    assert 'a' in cache
    assert 'b' not in cache

    cache.set('e', payload(8))
    assert 'c' not in cache
    assert 'a' in cache

    cache.set('f', payload(8))
    assert 'a' not in cache


def test_replacing_a_key_does_not_double_count():
    cache = LRUCache(100)
    cache.set('a', payload(8))
    cache.set('a', payload(18))
    assert len(cache) == 1
    assert cache.current_size == 40
    assert cache.get('a') == payload(18)


def test_size_never_exceeds_capacity():
    cache = LRUCache(100)
    for i in range(25):
        cache.set(i, payload(i % 7))
        assert cache.current_size <= cache.max_size
        assert cache.current_size == sum(
            LRUCache.estimate_size(payload(k % 7)) for k in range(25) if k in cache
        )


def test_oversized_entry_empties_cache_and_is_still_stored():
    cache = LRUCache(50)
    cache.set('a', payload(8))
    cache.set('b', payload(8))

    cache.set('big', payload(40))
    assert len(cache) == 1
    assert cache.get('big') == payload(40)
    assert cache.current_size == 84
    assert cache.current_size > cache.max_size

    cache.set('c', payload(8))
    assert 'big' not in cache
    assert cache.current_size == 20


def test_unserializable_value_raises_and_leaves_cache_untouched():
    cache = LRUCache(100)
    cache.set('a', payload(8))
    with pytest.raises(TypeError):
        cache.set('a', object())
    assert cache.get('a') == payload(8)
    assert cache.current_size == 20


def test_remove_and_clear():
    cache = LRUCache(100)
    cache.set('a', payload(8))
    cache.set('b', payload(8))

    cache.remove('a')
    cache.remove('missing')
    assert len(cache) == 1
    assert cache.current_size == 20

    cache.clear()
    assert len(cache) == 0
    assert cache.current_size == 0


def test_stats():
    cache = LRUCache(80)
    cache.set('a', payload(8))
    assert cache.stats() == {
        'entry_count': 1,
        'current_size': 20,
        'capacity': 80,
        'utilization_percent': 25.0,
    }


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)
