import random

import pytest

from pagesim.caches import CLOCKCache, FIFOCache, LRUCache, OPTCache, RANDCache


def _replay(cache, trace):
    return [cache.access(page) for page in trace]


# --- FIFO ---------------------------------------------------------------------------


def test_fifo_overwrites_oldest_slot_and_rotates_cursor():
    cache = FIFOCache(2)
    assert _replay(cache, [1, 2, 3]) == [False, False, False]
    assert cache.slots == [3, 2]
    assert cache.cursor == 1
    assert cache.get_stats() == {"hits": 0, "misses": 3, "evictions": 1}


def test_fifo_hit_does_not_promote():
    cache = FIFOCache(2)
    _replay(cache, [1, 2, 1, 3])
    # 1 was hit but is still the oldest insert, so 3 replaced it
    assert cache.resident_pages() == [3, 2]


def test_fifo_zero_slots():
    cache = FIFOCache(0)
    assert _replay(cache, [1, 1, 1]) == [False, False, False]
    assert cache.cursor == 0
    assert cache.resident_pages() == []


# --- OPT ----------------------------------------------------------------------------


def test_opt_evicts_page_never_used_again():
    cache = OPTCache(3, [1, 2, 3, 4, 1, 2])
    _replay(cache, [1, 2, 3, 4])
    assert cache.resident_pages() == [1, 2, 4]
    assert _replay(cache, [1, 2]) == [True, True]


def test_opt_breaks_ties_on_lowest_page_id():
    cache = OPTCache(3, [3, 1, 2, 4, 1])
    _replay(cache, [3, 1, 2, 4])
    # 2 and 3 never recur, the lower id goes
    assert cache.resident_pages() == [1, 3, 4]


def test_opt_evicts_farthest_next_use():
    trace = [1, 2, 3, 4, 3, 2, 1]
    cache = OPTCache(3, trace)
    _replay(cache, trace[:4])
    assert cache.resident_pages() == [2, 3, 4]


def test_opt_requires_trace():
    cache = OPTCache(2)
    with pytest.raises(RuntimeError):
        cache.access(1)
    cache.prime([1, 1])
    assert _replay(cache, [1, 1]) == [False, True]


def test_opt_rejects_access_outside_primed_trace():
    cache = OPTCache(2, [1, 2])
    with pytest.raises(ValueError):
        cache.access(3)
    cache.prime([1])
    cache.access(1)
    with pytest.raises(ValueError):
        cache.access(1)


def test_opt_prime_restarts_run():
    cache = OPTCache(1, [5, 5])
    _replay(cache, [5, 5])
    cache.prime([5, 5])
    assert cache.get_stats() == {"hits": 0, "misses": 0, "evictions": 0}
    assert cache.resident_pages() == []


# --- RAND ---------------------------------------------------------------------------


class _FirstSlotRandom(random.Random):
    def randrange(self, *args, **kwargs):
        return 0


def test_rand_overwrites_slot_drawn_from_injected_rng():
    cache = RANDCache(2, rng=_FirstSlotRandom())
    _replay(cache, [1, 2, 3])
    assert cache.resident_pages() == [3, 2]
    assert cache.get_stats()["evictions"] == 1


def test_rand_victim_is_a_resident_page():
    cache = RANDCache(2, seed=7)
    _replay(cache, [1, 2, 3])
    resident = cache.resident_pages()
    assert len(resident) == 2
    assert 3 in resident
    assert set(resident) & {1, 2}


def test_rand_same_seed_same_choices():
    trace = [random.Random(3).randrange(10) for _ in range(300)]
    first = RANDCache(4, seed=11)
    second = RANDCache(4, seed=11)
    assert _replay(first, trace) == _replay(second, trace)


def test_rand_does_not_touch_global_random_state():
    state = random.getstate()
    _replay(RANDCache(1, seed=1), [1, 2, 3, 4])
    assert random.getstate() == state


def test_rand_rejects_seed_and_rng_together():
    with pytest.raises(ValueError):
        RANDCache(2, seed=1, rng=random.Random(1))


# --- LRU ----------------------------------------------------------------------------


def test_lru_evicts_least_recently_used():
    cache = LRUCache(3)
    _replay(cache, [1, 2, 3, 1, 4])
    assert cache.resident_pages() == [3, 1, 4]
    assert cache.get_stats() == {"hits": 1, "misses": 4, "evictions": 1}


def test_lru_ticks_once_per_access():
    cache = LRUCache(2)
    _replay(cache, [1, 1, 2])
    assert cache.tick == 3
    assert cache.last_access == {1: 1, 2: 2}


# --- CLOCK --------------------------------------------------------------------------


def test_clock_hit_sets_bit_without_moving():
    cache = CLOCKCache(3)
    _replay(cache, [1, 2, 3])
    cache.entries[1][1] = False
    assert cache.access(2) is True
    assert cache.resident_pages() == [1, 2, 3]
    assert cache.use_bits() == [True, True, True]


def test_clock_full_sweep_evicts_starting_slot():
    cache = CLOCKCache(3)
    _replay(cache, [1, 2, 3, 4])
    assert cache.resident_pages() == [4, 2, 3]
    assert cache.use_bits() == [True, False, False]
    assert cache.hand == 1


def test_clock_hand_persists_between_misses():
    cache = CLOCKCache(3)
    _replay(cache, [1, 2, 3, 4, 5])
    assert cache.resident_pages() == [4, 5, 3]
    assert cache.hand == 2
    assert cache.access(2) is False
    assert cache.resident_pages() == [4, 5, 2]
    assert cache.hand == 0


def test_clock_skips_referenced_pages():
    cache = CLOCKCache(3)
    _replay(cache, [1, 2, 3, 4])
    # bits are [4:T, 2:F, 3:F], hand on 2; referencing 2 gives it a second chance
    cache.access(2)
    cache.access(5)
    assert cache.resident_pages() == [4, 2, 5]
    assert cache.use_bits() == [True, False, True]
    assert cache.hand == 0


def test_clock_zero_capacity():
    cache = CLOCKCache(0)
    assert _replay(cache, [1, 1]) == [False, False]
    assert cache.resident_pages() == []


# --- shared -------------------------------------------------------------------------


ALL_CACHES = [
    lambda size, trace: FIFOCache(size),
    lambda size, trace: OPTCache(size, trace),
    lambda size, trace: RANDCache(size, seed=0),
    lambda size, trace: LRUCache(size),
    lambda size, trace: CLOCKCache(size),
]


@pytest.mark.parametrize("factory", ALL_CACHES)
def test_resident_set_never_exceeds_capacity(factory):
    rng = random.Random(42)
    trace = [rng.randrange(12) for _ in range(400)]
    for size in range(0, 6):
        cache = factory(size, trace)
        for page in trace:
            cache.access(page)
            resident = cache.resident_pages()
            assert len(resident) <= size
            assert len(set(resident)) == len(resident)


@pytest.mark.parametrize("factory", ALL_CACHES)
def test_resident_page_is_always_a_hit(factory):
    rng = random.Random(5)
    trace = [rng.randrange(8) for _ in range(200)]
    cache = factory(3, trace)
    for page in trace:
        was_resident = page in cache.resident_pages()
        assert cache.access(page) is was_resident


@pytest.mark.parametrize("factory", ALL_CACHES)
@pytest.mark.parametrize("size", [-1, -10])
def test_negative_size_rejected(factory, size):
    with pytest.raises(ValueError):
        factory(size, [1])


@pytest.mark.parametrize("factory", ALL_CACHES)
@pytest.mark.parametrize("size", [2.5, "3", True])
def test_non_integer_size_rejected(factory, size):
    with pytest.raises(TypeError):
        factory(size, [1])


def test_clock_hand_moves_past_victim():
    cache = CLOCKCache(2)
    hits = sum(_replay(cache, [1, 2, 3, 1, 3, 4, 3]))
    # a hand left on the victim would clear 3's bit early and keep it for the last access
    assert hits == 1
    assert cache.hand == 0
    assert cache.resident_pages() == [4, 3]
    assert cache.use_bits() == [True, True]


class _IntLike:
    def __init__(self, value):
        self.value = value

    def __index__(self):
        return self.value


@pytest.mark.parametrize("factory", ALL_CACHES)
def test_integer_like_size_accepted(factory):
    cache = factory(_IntLike(2), [1, 2, 1])
    assert cache.size == 2
    assert type(cache.size) is int
    assert [cache.access(page) for page in (1, 2, 1)] == [False, False, True]
