from __future__ import annotations

import logging
from typing import Dict, List

from ..cache_base import Cache

logger = logging.getLogger(__name__)


class CLOCKCache(Cache):
    """Second-chance approximation of LRU.

    Entries are ``[page, use_bit]`` pairs in a circular buffer. The hand
    survives between accesses, so each sweep resumes where the last victim
    was taken.
    """

    def __init__(self, size: int):
        super().__init__(size)
        self.entries: List[List] = []
        self.hand = 0
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def _find(self, page_id: int) -> int:
        for index, (page, _) in enumerate(self.entries):
            if page == page_id:
                return index
        return -1

    def _sweep(self) -> int:
        # bits cleared here stay clear, so this ends within one revolution
        steps = 0
        while self.entries[self.hand][1]:
            self.entries[self.hand][1] = False
            self.hand = (self.hand + 1) % len(self.entries)
            steps += 1
        logger.debug("clock sweep took %d steps, victim slot %d", steps, self.hand)
        return self.hand

    def access(self, page_id: int) -> bool:
        index = self._find(page_id)
        if index >= 0:
            self.entries[index][1] = True
            self.hits += 1
            return True

        self.misses += 1
        if len(self.entries) < self.size:
            self.entries.append([page_id, True])
        elif self.entries:
            victim = self._sweep()
            self.entries[victim] = [page_id, True]
            self.hand = (victim + 1) % len(self.entries)
            self.evictions += 1
        return False

    def use_bits(self) -> List[bool]:
        return [bit for _, bit in self.entries]

    def resident_pages(self) -> List[int]:
        return [page for page, _ in self.entries]

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "evictions": self.evictions}
