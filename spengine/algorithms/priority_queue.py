"""Binary min-heap used as the search frontier.

The queue supports insertion and extract-minimum only. There is no
decrease-key: searches insert a node again whenever its tentative distance
improves and discard stale copies when they are extracted (lazy deletion).

Entries are stored as ``(priority, sequence, element)`` so that elements never
have to be comparable. The sequence number makes the order among equal
priorities deterministic for a given insertion history, but callers must not
rely on any particular tie order.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Priority = float


class PriorityQueue(Generic[T]):
    """Min-heap of ``(priority, element)`` pairs.

    Example:
        >>> pq = PriorityQueue()
        >>> pq.insert("b", 2.0)
        >>> pq.insert("a", 1.0)
        >>> pq.extract_min()
        (1.0, 'a')
    """

    __slots__ = ("_heap", "_counter")

    def __init__(self) -> None:
        self._heap: List[Tuple[Priority, int, T]] = []
        self._counter = count()

    def insert(self, element: T, priority: Priority) -> None:
        """Add ``element`` with ``priority``. O(log n)."""
        heappush(self._heap, (priority, next(self._counter), element))

    def extract_min(self) -> Optional[Tuple[Priority, T]]:
        """Remove and return the minimum ``(priority, element)``, or None if empty."""
        if not self._heap:
            return None
        priority, _, element = heappop(self._heap)
        return priority, element

    def peek(self) -> Optional[Tuple[Priority, T]]:
        """Return the minimum ``(priority, element)`` without removing it."""
        if not self._heap:
            return None
        priority, _, element = self._heap[0]
        return priority, element

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Tuple[Priority, T]]:
        """Iterate entries in heap-array order (not sorted)."""
        return ((priority, element) for priority, _, element in self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"
