"""Depth-first traversals of a linked binary tree, recursive and stack based.

Each function takes the root node (or None) and returns the visited values
as a list.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.complete_tree import Node


def _inorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: Node | None) -> list[Any]:
    """Left subtree, node, right subtree."""
    return list(_inorder(root))


def preorder(root: Node | None) -> list[Any]:
    """Node, left subtree, right subtree."""
    return list(_preorder(root))


def postorder(root: Node | None) -> list[Any]:
    """Left subtree, right subtree, node."""
    return list(_postorder(root))


def iterative_inorder(root: Node | None) -> list[Any]:
    """In-order traversal using an explicit stack."""
    result: list[Any] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    return result


def iterative_preorder(root: Node | None) -> list[Any]:
    """Pre-order traversal using an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        current = stack.pop()
        result.append(current.data)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return result


def iterative_postorder(root: Node | None) -> list[Any]:
    """Post-order traversal using one stack and the previously visited node."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    previous: Node | None = None
    while stack:
        current = stack[-1]
        descending = previous is None or previous.left is current or previous.right is current
        if descending:
            if current.left is not None:
                stack.append(current.left)
            elif current.right is not None:
                stack.append(current.right)
            else:
                stack.pop()
                result.append(current.data)
        elif current.left is previous:
            if current.right is not None:
                stack.append(current.right)
            else:
                stack.pop()
                result.append(current.data)
        elif current.right is previous:
            stack.pop()
            result.append(current.data)
        previous = current
    return result