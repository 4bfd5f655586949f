"""Function-per-policy entry points: (trace, capacity) -> hit count."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .cache_base import Cache
from .caches import CLOCKCache, FIFOCache, LRUCache, OPTCache, RANDCache

HitCounter = Callable[[Sequence[int], int], int]


def count_hits(cache: Cache, trace: Iterable[int]) -> int:
    hits = 0
    for page_id in trace:
        if cache.access(page_id):
            hits += 1
    return hits


def fifo_hits(trace: Sequence[int], capacity: int) -> int:
    return count_hits(FIFOCache(capacity), trace)


def opt_hits(trace: Sequence[int], capacity: int) -> int:
    trace_list = list(trace)
    return count_hits(OPTCache(capacity, trace_list), trace_list)


def rand_hits(trace: Sequence[int], capacity: int, seed: Optional[int] = None) -> int:
    return count_hits(RANDCache(capacity, seed=seed), trace)


def lru_hits(trace: Sequence[int], capacity: int) -> int:
    return count_hits(LRUCache(capacity), trace)


def clock_hits(trace: Sequence[int], capacity: int) -> int:
    return count_hits(CLOCKCache(capacity), trace)


POLICIES: Dict[str, HitCounter] = {
    "FIFO": fifo_hits,
    "OPT": opt_hits,
    "RAND": rand_hits,
    "LRU": lru_hits,
    "CLOCK": clock_hits,
}

POLICY_NAMES: List[str] = list(POLICIES)


def _normalize(policy: str) -> str:
    name = policy.strip().upper()
    if name not in POLICIES:
        raise ValueError(f"Unknown policy '{policy}', expected one of {', '.join(POLICY_NAMES)}")
    return name


def hit_count(policy: str, trace: Sequence[int], capacity: int, *, seed: Optional[int] = None) -> int:
    """Run one policy over ``trace``; ``seed`` only matters for RAND."""
    name = _normalize(policy)
    if name == "RAND":
        return rand_hits(trace, capacity, seed=seed)
    return POLICIES[name](trace, capacity)


def build_cache(
    policy: str, capacity: int, trace: Sequence[int], *, seed: Optional[int] = None
) -> Cache:
    """Fresh cache instance for ``policy``; OPT is primed with ``trace``."""
    name = _normalize(policy)
    if name == "FIFO":
        return FIFOCache(capacity)
    if name == "OPT":
        return OPTCache(capacity, trace)
    if name == "RAND":
        return RANDCache(capacity, seed=seed)
    if name == "LRU":
        return LRUCache(capacity)
    return CLOCKCache(capacity)
