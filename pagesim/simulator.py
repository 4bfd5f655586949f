from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List

from .cache_base import Cache
from .policies import count_hits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """One policy replayed over one trace at one capacity."""

    policy: str
    capacity: int
    requests: int
    hits: int
    misses: int
    evictions: int
    elapsed_ns: int

    @property
    def hit_rate(self) -> float:
        return self.hits / self.requests if self.requests else 0.0

    @property
    def ns_per_request(self) -> float:
        return self.elapsed_ns / self.requests if self.requests else 0.0


class Simulator:
    """Replays a materialized trace through fresh cache instances.

    Hits are counted by ``count_hits``, the same replay behind
    ``hit_count``; the cache's own counters must agree with it.
    """

    def __init__(self, capacity: int, trace: Iterable[int]):
        self.capacity = capacity
        self.trace: List[int] = list(trace)

    def run(self, policy: str, cache: Cache) -> SimulationResult:
        if cache.size != self.capacity:
            raise ValueError(f"{policy} cache holds {cache.size} pages, simulator expects {self.capacity}")

        start = time.perf_counter_ns()
        hits = count_hits(cache, self.trace)
        elapsed = time.perf_counter_ns() - start

        stats = cache.get_stats()
        if stats["hits"] != hits or stats["hits"] + stats["misses"] != len(self.trace):
            raise RuntimeError(
                f"{policy} counters disagree with replay: {stats} vs {hits} hits over {len(self.trace)} requests"
            )

        logger.debug("%s capacity=%d hits=%d/%d", policy, self.capacity, hits, len(self.trace))
        return SimulationResult(
            policy=policy,
            capacity=self.capacity,
            requests=len(self.trace),
            hits=hits,
            misses=stats["misses"],
            evictions=stats["evictions"],
            elapsed_ns=elapsed,
        )
