from __future__ import annotations

from collections import defaultdict, deque
from typing import Deque, DefaultDict, Dict, Iterable, List, Optional, Set

from ..cache_base import Cache


class OPTCache(Cache):
    """Belady's optimal policy; needs the whole trace before the first access.

    On a full miss the victim is the resident page reused farthest in the
    future. Pages that never recur go first, lowest page id among them, so
    runs are reproducible regardless of set ordering.
    """

    def __init__(self, size: int, trace: Optional[Iterable[int]] = None):
        super().__init__(size)
        self.trace: Optional[List[int]] = None
        self.future_positions: DefaultDict[int, Deque[int]] = defaultdict(deque)
        self.cache: Set[int] = set()
        self.current_step = 0
        self.hits = 0
        self.misses = 0
        self.evictions = 0

        if trace is not None:
            self._preprocess_trace(trace)

    def _preprocess_trace(self, trace: Iterable[int]) -> None:
        self.trace = list(trace)
        self.future_positions.clear()
        for index, page_id in enumerate(self.trace):
            self.future_positions[page_id].append(index)

    def prime(self, trace: Iterable[int]) -> None:
        """Load the trace when the instance was built without one; restarts the run."""
        self._preprocess_trace(trace)
        self.cache.clear()
        self.current_step = 0
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def _drop_current_reference(self, page_id: int) -> None:
        if self.trace is None:
            raise RuntimeError("OPTCache needs the trace before the first access; call prime()")
        if self.current_step >= len(self.trace):
            raise ValueError(f"Access #{self.current_step} is past the end of the primed trace")
        expected = self.trace[self.current_step]
        if page_id != expected:
            raise ValueError(
                f"Access #{self.current_step} is page {page_id}, primed trace has page {expected}"
            )
        self.future_positions[page_id].popleft()

    def _select_victim(self) -> int:
        never_reused = [page for page in self.cache if not self.future_positions.get(page)]
        if never_reused:
            return min(never_reused)

        farthest_distance = -1
        victim = None
        for page in self.cache:
            next_use = self.future_positions[page][0]
            if next_use > farthest_distance:
                farthest_distance = next_use
                victim = page
        assert victim is not None
        return victim

    def access(self, page_id: int) -> bool:
        self._drop_current_reference(page_id)

        hit = page_id in self.cache
        if hit:
            self.hits += 1
        else:
            self.misses += 1
            if self.size > 0:
                if len(self.cache) >= self.size:
                    self.cache.remove(self._select_victim())
                    self.evictions += 1
                self.cache.add(page_id)

        self.current_step += 1
        return hit

    def resident_pages(self) -> List[int]:
        return sorted(self.cache)

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "evictions": self.evictions}
