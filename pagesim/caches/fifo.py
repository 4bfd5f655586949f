from __future__ import annotations

from typing import Dict, List, Optional

from ..cache_base import Cache


class FIFOCache(Cache):
    """Fixed slot array with a rotating write cursor; hits never reorder slots."""

    def __init__(self, size: int):
        super().__init__(size)
        self.slots: List[Optional[int]] = [None] * self.size
        self.cursor = 0
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def access(self, page_id: int) -> bool:
        if page_id in self.slots:
            self.hits += 1
            return True

        self.misses += 1
        if not self.slots:
            return False

        if self.slots[self.cursor] is not None:
            self.evictions += 1
        self.slots[self.cursor] = page_id
        self.cursor = (self.cursor + 1) % len(self.slots)
        return False

    def resident_pages(self) -> List[int]:
        return [page for page in self.slots if page is not None]

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "evictions": self.evictions}
