"""
Search Frontier Module
======================

Min-priority queue of (cost, coordinate) entries on top of heapq.
"""

import heapq
from typing import List, NamedTuple, Optional, Tuple


class FrontierEntry(NamedTuple):
    """Tentative cost for a cell; orders by cost, then row-major coordinate"""
    cost: int
    coord: Tuple[int, int]


class Frontier:
    """
    Priority collection of discovered cells.

    Entries are never updated in place. A cheaper cost for a cell is
    pushed as a new entry and the older one is left to be skipped by
    the caller when it surfaces.
    """

    def __init__(self):
        self._heap: List[FrontierEntry] = []

    def push(self, cost: int, coord: Tuple[int, int]):
        heapq.heappush(self._heap, FrontierEntry(cost, coord))

    def pop_min(self) -> Optional[FrontierEntry]:
        """Remove and return the cheapest entry, or None when empty"""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[FrontierEntry]:
        return self._heap[0] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
