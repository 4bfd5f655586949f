from __future__ import annotations

from typing import Dict, List

from ..cache_base import Cache


class LRUCache(Cache):
    """LRU keyed on a logical clock: one tick per access, not wall-clock time."""

    def __init__(self, size: int):
        super().__init__(size)
        self.last_access: Dict[int, int] = {}
        self.tick = 0
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def _oldest(self) -> int:
        oldest_page = None
        oldest_tick = None
        for page, stamp in self.last_access.items():
            if oldest_tick is None or stamp < oldest_tick:
                oldest_page, oldest_tick = page, stamp
        assert oldest_page is not None
        return oldest_page

    def access(self, page_id: int) -> bool:
        now = self.tick
        self.tick += 1

        if page_id in self.last_access:
            self.last_access[page_id] = now
            self.hits += 1
            return True

        self.misses += 1
        if self.size == 0:
            return False
        if len(self.last_access) >= self.size:
            del self.last_access[self._oldest()]
            self.evictions += 1
        self.last_access[page_id] = now
        return False

    def resident_pages(self) -> List[int]:
        return sorted(self.last_access, key=self.last_access.__getitem__)

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "evictions": self.evictions}
