"""A bounded last-in first-out stack and the errors shared by the containers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Overflow(Exception):
    """Raised when adding to a container that is full."""


class Underflow(IndexError):
    """Raised when taking from a container that is empty."""


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise Overflow if the stack is full."""
        if len(self._items) == self.capacity:
            raise Overflow("stack is overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise Underflow if empty."""
        if not self._items:
            raise Underflow("stack is underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; raise Underflow if empty."""
        if not self._items:
            raise Underflow("stack is underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        return reversed(self._items)