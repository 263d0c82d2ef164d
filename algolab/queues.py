"""First-in, first-out queues: a ring buffer and a linked one."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ArrayQueue(Generic[T]):
    """Queue stored in a circular buffer that doubles when full."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._back = 0
        self._size = 0

    def push(self, value: T) -> None:
        if self._size == len(self._buffer):
            new_size = max(1, self._size * 2)
            ordered = [
                self._buffer[(self._front + i) % len(self._buffer)]
                for i in range(self._size)
            ]
            self._buffer = ordered + [None] * (new_size - self._size)
            self._front = 0
            self._back = self._size
        self._buffer[self._back] = value
        self._back = (self._back + 1) % len(self._buffer)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the oldest value."""
        value = self.front()
        self._buffer[self._front] = None
        self._front = (self._front + 1) % len(self._buffer)
        self._size -= 1
        return value

    def front(self) -> T:
        """Return the oldest value without removing it."""
        if not self._size:
            raise IndexError("queue is empty")
        return self._buffer[self._front]

    def capacity(self) -> int:
        """Size of the underlying buffer."""
        return len(self._buffer)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0


class ListQueue(Generic[T]):
    """Queue backed by a double-ended queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the oldest value."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the oldest value without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)