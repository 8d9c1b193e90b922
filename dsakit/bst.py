"""A linked binary search tree with insertion, deletion, search and traversals."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsakit.complete_tree import Node
from dsakit.traversals import (
    iterative_inorder,
    iterative_postorder,
    iterative_preorder,
)


class BinarySearchTree:
    """An unbalanced binary search tree of distinct keys."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        if self.root is None:
            self.root = Node(key)
            return True
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = Node(key)
                    return True
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = Node(key)
                    return True
                node = node.right
            else:
                return False

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not in the tree.

        A node with two children takes the key of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: Node | None = None
        node = self.root
        while node is not None and node.data != key:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return True
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False

    def minimum(self) -> Any:
        """Return the smallest key; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("binary search tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def is_empty(self) -> bool:
        return self.root is None

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return iterative_inorder(self.root)

    def preorder(self) -> list[Any]:
        """Keys in node, left, right order."""
        return iterative_preorder(self.root)

    def postorder(self) -> list[Any]:
        """Keys in left, right, node order."""
        return iterative_postorder(self.root)