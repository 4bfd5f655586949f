from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Dict, List


class Cache(ABC):

    def __init__(self, size: int):
        if isinstance(size, bool):
            raise TypeError("Cache size must be an integer, got bool")
        try:
            size = operator.index(size)
        except TypeError:
            raise TypeError(f"Cache size must be an integer, got {type(size).__name__}") from None
        if size < 0:
            raise ValueError(f"Cache size must be non-negative, got {size}")
        self.size = size

    @abstractmethod
    def access(self, page_id: int) -> bool:
        """Access a page; return True on hit and False on miss."""

    @abstractmethod
    def resident_pages(self) -> List[int]:
        """Return the pages currently held, in slot order where the policy has one."""

    @abstractmethod
    def get_stats(self) -> Dict[str, int]:
        """Return internal statistics (hits, misses, evictions)."""
