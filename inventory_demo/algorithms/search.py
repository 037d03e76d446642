from __future__ import annotations

from collections.abc import Iterable, Sequence

from inventory_demo.models import Item


def linear_search_by_name(items: Iterable[Item], name: str) -> Item | None:
    """Return the first item named `name` in iteration order, or None."""

    for item in items:
        if item.name == name:
            return item
    return None


def binary_search_by_id(items: Sequence[Item], item_id: int) -> Item | None:
    """Binary search over `items`, which must already be ascending by id.

    Callers that cannot guarantee the ordering should go through
    `InventoryStore.binary_search_by_id`, which sorts lazily first.
    """

    left = 0
    right = len(items) - 1

    # If the id is present, its position lies within [left, right].
    while left <= right:
        mid = left + (right - left) // 2
        mid_id = items[mid].id

        if mid_id == item_id:
            return items[mid]

        if mid_id < item_id:
            left = mid + 1
        else:
            right = mid - 1

    return None
