"""Binary-heap priority queue with a configurable ordering."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Priority queue on an array heap.

    ``before(a, b)`` is true when ``a`` should leave the queue ahead of ``b``.
    The default, ``operator.gt``, yields the largest value first; pass
    ``operator.lt`` for smallest first.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        before: Callable[[Any, Any], bool] = operator.gt,
    ) -> None:
        self._heap: list[T] = []
        self._before = before
        for item in items:
            self.push(item)

    def push(self, value: T) -> None:
        heap = self._heap
        heap.append(value)
        now = len(heap) - 1
        while now > 0:
            parent = (now - 1) // 2
            if self._before(heap[parent], heap[now]):
                break
            heap[now], heap[parent] = heap[parent], heap[now]
            now = parent

    def pop(self) -> T:
        """Remove and return the value with the highest priority."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from empty PriorityQueue")
        result = heap[0]
        heap[0] = heap[-1]
        heap.pop()
        now = 0
        while True:
            left, right = 2 * now + 1, 2 * now + 2
            if left >= len(heap):
                break
            nxt = now
            if self._before(heap[left], heap[nxt]):
                nxt = left
            if right < len(heap) and self._before(heap[right], heap[nxt]):
                nxt = right
            if nxt == now:
                break
            heap[now], heap[nxt] = heap[nxt], heap[now]
            now = nxt
        return result

    def top(self) -> T:
        """Return the value with the highest priority without removing it."""
        if not self._heap:
            raise IndexError("top of empty PriorityQueue")
        return self._heap[0]

    def drain(self) -> Iterator[T]:
        """Pop and yield values until the queue is empty."""
        while self._heap:
            yield self.pop()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)