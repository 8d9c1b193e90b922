"""Classic comparison sorts.

Each sort takes any iterable, leaves it untouched and returns a new list
in ascending order.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for last in range(len(items) - 2, -1, -1):
        for j in range(last + 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort_largest(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the largest remaining element to the end of the unsorted part."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        max_index = max(range(end + 1), key=items.__getitem__)
        items[end], items[max_index] = items[max_index], items[end]
    return items


def selection_sort_smallest(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front of the unsorted part."""
    items = list(values)
    count = len(items)
    for start in range(count - 1):
        min_index = min(range(start, count), key=items.__getitem__)
        items[start], items[min_index] = items[min_index], items[start]
    return items


def exchange_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by comparing each position with every later one and swapping when out of order."""
    items = list(values)
    count = len(items)
    for i in range(count):
        for j in range(i + 1, count):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[high]``.

    Elements not greater than the pivot end up before it, greater ones after.
    Returns the pivot's final index.
    """
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items