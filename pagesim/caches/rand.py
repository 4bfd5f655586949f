from __future__ import annotations

import random
from typing import Dict, List, Optional

from ..cache_base import Cache


class RANDCache(Cache):
    """Evicts a uniformly random resident page when a miss hits a full cache.

    The generator is private to the instance. Pass ``seed`` (or a ready
    ``random.Random`` as ``rng``) for reproducible runs; with neither the
    generator is seeded from system entropy.
    """

    def __init__(self, size: int, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        super().__init__(size)
        if seed is not None and rng is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.rng = rng if rng is not None else random.Random(seed)
        self.pages: List[int] = []
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def access(self, page_id: int) -> bool:
        if page_id in self.pages:
            self.hits += 1
            return True

        self.misses += 1
        if len(self.pages) < self.size:
            self.pages.append(page_id)
        elif self.pages:
            self.pages[self.rng.randrange(len(self.pages))] = page_id
            self.evictions += 1
        return False

    def resident_pages(self) -> List[int]:
        return list(self.pages)

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "evictions": self.evictions}
