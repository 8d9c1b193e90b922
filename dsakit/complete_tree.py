"""A linked complete binary tree filled level by level."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)


class CompleteBinaryTree:
    """A binary tree kept complete: each insertion fills the next free spot in level order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._pending: deque[Node] = deque()
        self._count = 0
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> Node:
        """Add ``data`` at the next free position and return its node."""
        node = Node(data)
        if self.root is None:
            self.root = node
        else:
            parent = self._pending[0]
            if parent.left is None:
                parent.left = node
            elif parent.right is None:
                parent.right = node
            if parent.left is not None and parent.right is not None:
                self._pending.popleft()
        self._pending.append(node)
        self._count += 1
        return node

    def _nodes(self) -> Iterator[Node]:
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def level_order(self) -> list[Any]:
        """Return the values level by level, left to right."""
        return [node.data for node in self._nodes()]

    def search(self, data: Any) -> Node | None:
        """Return the first node in level order holding ``data``, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    def delete(self, data: Any) -> None:
        """Remove ``data`` by overwriting it with the deepest value and dropping the deepest node.

        Raises KeyError if ``data`` is not in the tree.
        """
        target = self.search(data)
        if target is None:
            raise KeyError(data)
        parent: Node | None = None
        deepest: Node | None = None
        for node in self._nodes():
            deepest = node
        assert deepest is not None
        for node in self._nodes():
            if node.left is deepest or node.right is deepest:
                parent = node
                break
        target.data = deepest.data
        if parent is None:
            self.root = None
        elif parent.right is deepest:
            parent.right = None
        else:
            parent.left = None
        self._count -= 1
        self._pending = deque(
            node for node in self._nodes() if node.left is None or node.right is None
        )

    def __len__(self) -> int:
        return self._count