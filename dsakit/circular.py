"""Circular queues: a bounded ring buffer and an unbounded circular linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from dsakit.stack import Overflow, Underflow


class CircularQueue:
    """A fixed-size ring buffer queue; freed slots are reused."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raise Overflow if every slot is taken."""
        if self._count == self.capacity:
            raise Overflow("circular queue is overflow")
        self._slots[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise Underflow if empty."""
        if self._count == 0:
            raise Underflow("circular queue is underflow")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        if self._count == 0:
            self._head = 0
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        for offset in range(self._count):
            yield self._slots[(self._head + offset) % self.capacity]


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = field(default=None, repr=False)


class LinkedCircularQueue:
    """An unbounded queue kept as a circular singly linked list.

    Only the rear node is held; its successor is the front.
    """

    def __init__(self) -> None:
        self._rear: _Node | None = None
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise Underflow if empty."""
        if self._rear is None:
            raise Underflow("circular queue is underflow")
        front = self._rear.next
        assert front is not None
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._count -= 1
        return front.value

    def is_empty(self) -> bool:
        return self._rear is None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        if self._rear is None:
            return
        node = self._rear.next
        while True:
            assert node is not None
            yield node.value
            if node is self._rear:
                return
            node = node.next