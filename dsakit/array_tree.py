"""A binary tree stored in a fixed array, children of slot i at 2i+1 and 2i+2."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any


class ArrayBinaryTree:
    """A binary tree laid out level by level in a list of slots.

    The number of slots is ``2 ** height - 1``, where ``height`` is
    ``log2(node_count) + 1`` rounded to the nearest integer. Empty slots
    hold None.
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 1:
            raise ValueError("node_count must be positive")
        self.height = math.floor(math.log2(node_count) + 1 + 0.5)
        self.size = 2**self.height - 1
        self._slots: list[Any] = [None] * self.size

    def set_root(self, key: Any) -> None:
        """Place ``key`` at the root; raise ValueError if a root is already set."""
        if self._slots[0] is not None:
            raise ValueError("root is already set")
        self._slots[0] = key

    def add_left(self, key: Any, parent_index: int) -> None:
        """Put ``key`` in the left child slot of ``parent_index``."""
        self._place(key, parent_index, 2 * parent_index + 1)

    def add_right(self, key: Any, parent_index: int) -> None:
        """Put ``key`` in the right child slot of ``parent_index``."""
        self._place(key, parent_index, 2 * parent_index + 2)

    def _place(self, key: Any, parent_index: int, child_index: int) -> None:
        if not 0 <= parent_index < self.size or self._slots[parent_index] is None:
            raise IndexError(f"no parent found at index {parent_index}")
        if child_index >= self.size:
            raise IndexError(f"child position {child_index} is outside the tree")
        self._slots[child_index] = key

    def update(self, old: Any, new: Any) -> int:
        """Replace every occurrence of ``old`` with ``new``; return how many changed."""
        changed = 0
        for index, value in enumerate(self._slots):
            if value is not None and value == old:
                self._slots[index] = new
                changed += 1
        return changed

    def delete(self, key: Any) -> None:
        """Remove ``key`` by moving the last occupied slot into its place.

        When ``key`` occurs more than once, its last occurrence is replaced.
        Raises KeyError if ``key`` is not in the tree.
        """
        target = None
        last = None
        for index, value in enumerate(self._slots):
            if value is None:
                continue
            if value == key:
                target = index
            last = index
        if target is None or last is None:
            raise KeyError(key)
        self._slots[target] = self._slots[last]
        self._slots[last] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the occupied slots in array order."""
        return (value for value in self._slots if value is not None)