"""A min-priority queue whose items carry a weight of their own."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-priority queue: the item with the smallest weight is always on top.

    Items are compared by equality only; ordering is decided by the weight
    given to :meth:`push`, with insertion order breaking ties.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        return (item for _, _, item in self._heap)

    def push(self, item: T, weight: float) -> None:
        """Add ``item`` with priority ``weight``."""
        heapq.heappush(self._heap, (weight, next(self._counter), item))

    def top(self) -> T:
        """Return the item with the smallest weight without removing it."""
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0][2]

    def pop_top(self) -> T:
        """Remove and return the item with the smallest weight."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def _position(self, item: object) -> int | None:
        return next(
            (pos for pos, (_, _, queued) in enumerate(self._heap) if queued == item),
            None,
        )

    def remove(self, item: T) -> bool:
        """Remove the first queued entry equal to ``item``; report whether one was found."""
        position = self._position(item)
        if position is None:
            return False
        del self._heap[position]
        heapq.heapify(self._heap)
        return True

    def contains(self, item: object) -> bool:
        """Return whether an entry equal to ``item`` is queued."""
        return self._position(item) is not None

    def change(self, item: T, weight: float) -> bool:
        """Give ``item`` a new weight; report whether it was queued at all."""
        if not self.remove(item):
            return False
        self.push(item, weight)
        return True