# pqueue/core/topk_queue.py
from __future__ import annotations

from bisect import bisect_right
from operator import attrgetter
from typing import Iterator, List, Optional, Tuple

from .types import InvalidCapacityError, Neighbor


_by_key = attrgetter("key")


class NeighborQueue:
    """
    Bounded priority queue keeping the ``capacity`` closest neighbors seen so far.

    Entries live in a flat list sorted ascending by (dist, id). Insertion is a
    binary search followed by a single shift of the tail; capacities are
    expected to be small (tens of entries), as in graph traversal.

    Not thread-safe: use one queue per worker.
    """

    __slots__ = ("_neighbors", "_capacity")

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityError(f"capacity must be a positive int, got {capacity!r}")
        self._capacity = capacity
        self._neighbors: List[Neighbor] = []

    @classmethod
    def with_capacity(cls, capacity: int) -> NeighborQueue:
        return cls(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, neighbor: Neighbor) -> None:
        """
        Admit ``neighbor`` if it ranks among the ``capacity`` best entries.

        An entry equal to an existing (dist, id) pair goes after it; an entry
        that would land at or past ``capacity`` is dropped without touching
        the queue.
        """
        neighbors = self._neighbors
        pos = bisect_right(neighbors, neighbor.key, key=_by_key)
        if pos >= self._capacity:
            return

        if len(neighbors) == self._capacity:
            neighbors.pop()
        assert len(neighbors) < self._capacity
        neighbors.insert(pos, neighbor)

    def clear(self) -> None:
        self._neighbors.clear()

    def snapshot(self) -> Tuple[Neighbor, ...]:
        """Current contents, best first. Later inserts do not alter the returned tuple."""
        return tuple(self._neighbors)

    as_slice = snapshot

    @property
    def is_full(self) -> bool:
        return len(self._neighbors) == self._capacity

    def worst(self) -> Optional[Neighbor]:
        """Entry that the next admitted neighbor would evict when full."""
        return self._neighbors[-1] if self._neighbors else None

    def __len__(self) -> int:
        return len(self._neighbors)

    def __iter__(self) -> Iterator[Neighbor]:
        return iter(tuple(self._neighbors))

    def __repr__(self) -> str:
        return f"NeighborQueue(capacity={self._capacity}, len={len(self._neighbors)})"
