"""Indexed binary max-heap.

Supports changing the priority of a queued key in O(log n) by keeping a
key -> heap position map in step with every swap. The standard library's
heapq has no such operation, which is why this exists.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)


class IndexedMaxPriorityQueue(Generic[K]):
    """Max-priority queue over unique keys with update-by-key.

    Ties between equal priorities are resolved by heap position, which is
    deterministic for a given sequence of operations.

    Example:
        ```python
        queue = IndexedMaxPriorityQueue[str]()
        queue.insert("a", 0.2)
        queue.insert("b", 0.5)
        queue.update_priority("a", 0.9)
        queue.extract_max()  # ("a", 0.9)
        ```
    """

    __slots__ = ("_heap", "_index")

    def __init__(self) -> None:
        self._heap: list[tuple[K, float]] = []
        self._index: dict[K, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, key: K, priority: float) -> None:
        """Add a new key.

        Raises:
            ValueError: If the key is already queued.
        """
        if key in self._index:
            raise ValueError(f"Key already in queue: {key!r}")
        self._heap.append((key, priority))
        self._index[key] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_max(self) -> tuple[K, float] | None:
        """Remove and return the (key, priority) with the greatest priority.

        Returns None when the queue is empty.
        """
        if not self._heap:
            return None

        top = self._heap[0]
        last = self._heap.pop()
        del self._index[top[0]]
        if self._heap:
            self._heap[0] = last
            self._index[last[0]] = 0
            self._sift_down(0)
        return top

    def peek(self) -> tuple[K, float] | None:
        return self._heap[0] if self._heap else None

    def update_priority(self, key: K, priority: float) -> None:
        """Reposition ``key`` under a new priority; no-op if it is not queued."""
        i = self._index.get(key)
        if i is None:
            return

        old = self._heap[i][1]
        self._heap[i] = (key, priority)
        if priority > old:
            self._sift_up(i)
        elif priority < old:
            self._sift_down(i)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i][0]] = i
        self._index[heap[j][0]] = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[parent][1] >= heap[i][1]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = i
            left = 2 * i + 1
            right = left + 1
            if left < size and heap[left][1] > heap[largest][1]:
                largest = left
            if right < size and heap[right][1] > heap[largest][1]:
                largest = right
            if largest == i:
                return
            self._swap(i, largest)
            i = largest
