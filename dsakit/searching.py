"""Linear and binary search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(values: Iterable[Any], key: Any) -> int | None:
    """Return the position of the first element equal to ``key``, or None."""
    for position, value in enumerate(values):
        if value == key:
            return position
    return None


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return a position holding ``key`` in ascending ``values``, or None.

    With repeated keys the position found is whichever the halving reaches
    first, not necessarily the leftmost.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < key:
            low = mid + 1
        elif values[mid] == key:
            return mid
        else:
            high = mid - 1
    return None