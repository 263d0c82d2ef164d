"""A growable array with explicit capacity and a doubly linked list with sentinels."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_GROWTH_FACTOR = 1.5


class DynamicArray(Generic[T]):
    """Array that grows its storage by half again whenever it runs full."""

    def __init__(self) -> None:
        self._slots: list[Any] = []
        self._size = 0

    def append(self, value: T) -> None:
        """Store ``value`` at the end, growing the storage if it is full."""
        if self._size == len(self._slots):
            new_capacity = int(len(self._slots) * _GROWTH_FACTOR)
            if new_capacity == len(self._slots):
                new_capacity += 1
            self.reserve(new_capacity)
        self._slots[self._size] = value
        self._size += 1

    def reserve(self, capacity: int) -> None:
        """Make room for at least ``capacity`` items; never shrinks."""
        if len(self._slots) >= capacity:
            return
        self._slots.extend([None] * (capacity - len(self._slots)))

    def clear(self) -> None:
        """Drop every item while keeping the allocated capacity."""
        self._slots = [None] * len(self._slots)
        self._size = 0

    def capacity(self) -> int:
        """Number of items the storage holds before it must grow."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("DynamicArray index out of range")
        return index

    def __getitem__(self, index: int) -> T:
        return self._slots[self._check(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[self._check(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[: self._size])

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r}, capacity={self.capacity()})"


class ListNode(Generic[T]):
    """A node of :class:`LinkedList`; also serves as a position in it."""

    __slots__ = ("prev", "next", "value")

    def __init__(self, value: Any = None) -> None:
        self.prev: Optional[ListNode[T]] = None
        self.next: Optional[ListNode[T]] = None
        self.value = value

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList(Generic[T]):
    """Doubly linked list bounded by a head and a tail sentinel."""

    def __init__(self) -> None:
        self._head: ListNode[T] = ListNode()
        self._tail: ListNode[T] = ListNode()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def _add_before(self, before: ListNode[T], value: T) -> ListNode[T]:
        if before is self._head:
            raise ValueError("cannot insert before the head sentinel")
        node: ListNode[T] = ListNode(value)
        prev = before.prev
        prev.next = node
        node.prev = prev
        node.next = before
        before.prev = node
        self._size += 1
        return node

    def _remove(self, node: ListNode[T]) -> ListNode[T]:
        if node is self._head or node is self._tail:
            raise ValueError("cannot remove a sentinel node")
        prev, nxt = node.prev, node.next
        prev.next = nxt
        nxt.prev = prev
        node.prev = node.next = None
        self._size -= 1
        return nxt

    def append(self, value: T) -> ListNode[T]:
        """Add ``value`` at the back and return its node."""
        return self._add_before(self._tail, value)

    def pop(self) -> T:
        """Remove and return the last value."""
        if not self._size:
            raise IndexError("pop from empty LinkedList")
        last = self._tail.prev
        value = last.value
        self._remove(last)
        return value

    def insert(self, before: ListNode[T], value: T) -> ListNode[T]:
        """Insert ``value`` in front of ``before`` and return the new node."""
        return self._add_before(before, value)

    def erase(self, node: ListNode[T]) -> ListNode[T]:
        """Unlink ``node`` and return the node that followed it."""
        return self._remove(node)

    def end(self) -> ListNode[T]:
        """The position just past the last value."""
        return self._tail

    def first(self) -> ListNode[T]:
        """The node of the first value, or :meth:`end` when empty."""
        return self._head.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"