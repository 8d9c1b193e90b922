import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    exchange_sort,
    insertion_sort,
    partition,
    quick_sort,
    selection_sort_largest,
    selection_sort_smallest,
)

INPUTS = [
    [],
    [7],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 1, 4, 0],
    [-3, 10, -7, 0, 2],
    list(range(10)),
    list(range(10, 0, -1)),
]


@pytest.mark.parametrize("data", INPUTS)
def test_sort_matches_builtin(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort_largest(data) == expected
    assert selection_sort_smallest(data) == expected
    assert exchange_sort(data) == expected
    assert quick_sort(data) == expected


def test_sort_does_not_mutate_input():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert selection_sort_largest(data) == [1, 2, 3]
    assert selection_sort_smallest(data) == [1, 2, 3]
    assert exchange_sort(data) == [1, 2, 3]
    assert quick_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_sort_accepts_generator():
    assert bubble_sort(x for x in [9, 4, 6]) == [4, 6, 9]
    assert insertion_sort(x for x in [9, 4, 6]) == [4, 6, 9]
    assert selection_sort_largest(x for x in [9, 4, 6]) == [4, 6, 9]
    assert selection_sort_smallest(x for x in [9, 4, 6]) == [4, 6, 9]
    assert exchange_sort(x for x in [9, 4, 6]) == [4, 6, 9]
    assert quick_sort(x for x in [9, 4, 6]) == [4, 6, 9]


def test_sort_random_data():
    rng = random.Random(1234)
    data = [rng.randint(-50, 50) for _ in range(60)]
    expected = sorted(data)
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort_largest(data),
        selection_sort_smallest(data),
        exchange_sort(data),
        quick_sort(data),
    ]
    for result in results:
        assert result == expected
        assert all(a <= b for a, b in zip(result, result[1:]))


def test_partition_invariant():
    data = [9, 2, 7, 4, 1, 8, 5]
    pivot = data[-1]
    index = partition(data, 0, len(data) - 1)
    assert data[index] == pivot
    assert all(x <= pivot for x in data[:index])
    assert all(x > pivot for x in data[index + 1:])
    assert sorted(data) == [1, 2, 4, 5, 7, 8, 9]


def test_partition_subrange_leaves_rest_alone():
    data = [100, 3, 1, 2, -100]
    index = partition(data, 1, 3)
    assert data[0] == 100
    assert data[4] == -100
    assert data[index] == 2
    assert all(x <= 2 for x in data[1:index])


def test_quick_sort_handles_sorted_input_without_recursion_limit():
    data = list(range(1500))
    assert quick_sort(data) == data


def test_sorts_strings():
    words = ["pear", "apple", "fig"]
    assert quick_sort(words) == sorted(words)
    assert bubble_sort(words) == sorted(words)