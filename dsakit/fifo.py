"""A first-in first-out queue over a fixed array of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.stack import Overflow, Underflow


class ArrayQueue:
    """A queue whose slots are filled in order and never reused.

    ``capacity`` bounds the total number of values ever enqueued: once the
    last slot has been filled the queue reports overflow, even if earlier
    values have since been dequeued.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raise Overflow when no slot is left."""
        if len(self._slots) == self.capacity:
            raise Overflow("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise Underflow if empty."""
        if self._front >= len(self._slots):
            raise Underflow("queue is underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        return iter(self._slots[self._front:])