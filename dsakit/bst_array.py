"""A binary search tree stored in a fixed array, children of slot i at 2i+1 and 2i+2."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.stack import Overflow

_EMPTY = object()


class DuplicateKeyError(ValueError):
    """Raised when inserting a value that is already in the tree."""


class TreeFullError(Overflow):
    """Raised when a value's position falls outside the array."""


class ArrayBST:
    """A binary search tree laid out in ``capacity`` array slots.

    The root lives in slot 0; smaller values go to the left child slot,
    larger ones to the right.
    """

    def __init__(self, root_value: Any, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = [_EMPTY] * capacity
        self._slots[0] = root_value

    def insert(self, value: Any) -> int:
        """Place ``value`` at its search-tree position and return the slot index.

        Raises DuplicateKeyError if ``value`` is already present and
        TreeFullError if its position lies beyond the array.
        """
        index = 0
        while index < self.capacity:
            current = self._slots[index]
            if current is _EMPTY:
                self._slots[index] = value
                return index
            if value == current:
                raise DuplicateKeyError(f"{value!r} is a duplicate number")
            index = 2 * index + 1 if value < current else 2 * index + 2
        raise TreeFullError("no more space for new node")

    def set_left(self, position: int, value: Any) -> None:
        """Store ``value`` directly in the left child slot of ``position``."""
        self._set_child(position, 2 * position + 1, value)

    def set_right(self, position: int, value: Any) -> None:
        """Store ``value`` directly in the right child slot of ``position``."""
        self._set_child(position, 2 * position + 2, value)

    def _set_child(self, position: int, child: int, value: Any) -> None:
        if position < 0:
            raise IndexError(f"invalid position {position}")
        if child >= self.capacity:
            raise TreeFullError("array overflow")
        if self._slots[child] is not _EMPTY:
            raise ValueError("invalid insertion: slot already used")
        self._slots[child] = value

    def __iter__(self) -> Iterator[Any]:
        """Yield the used slots in array order."""
        return (value for value in self._slots if value is not _EMPTY)