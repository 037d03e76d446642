from __future__ import annotations

import random
from collections.abc import MutableSequence

from inventory_demo.models import Item


def swap(items: MutableSequence[Item], a: int, b: int) -> None:
    if a == b:
        return
    items[a], items[b] = items[b], items[a]


def fisher_yates_shuffle(items: MutableSequence[Item], *, rng: random.Random) -> None:
    """Shuffle `items` in place into a uniformly random permutation."""

    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        swap(items, i, j)


def partition_by_value(items: MutableSequence[Item], low: int, high: int) -> int:
    """Lomuto partition of items[low..high] around the value at `high`.

    Returns the pivot's final index. Items equal to the pivot end up on its left.
    """

    pivot_value = items[high].value
    i = low - 1

    for j in range(low, high):
        if items[j].value <= pivot_value:
            i += 1
            swap(items, i, j)

    swap(items, i + 1, high)
    return i + 1


def quicksort_by_value(items: MutableSequence[Item], low: int = 0, high: int | None = None) -> None:
    """Sort items[low..high] ascending by value, in place.

    Not stable: items with equal values may come out in any relative order.
    Recursion only descends into the smaller side of each partition, so the
    depth stays O(log n) even for sorted or all-equal input.
    """

    if high is None:
        high = len(items) - 1

    while low < high:
        pivot = partition_by_value(items, low, high)
        if pivot - low < high - pivot:
            quicksort_by_value(items, low, pivot - 1)
            low = pivot + 1
        else:
            quicksort_by_value(items, pivot + 1, high)
            high = pivot - 1
