"""Log line formatting for demo results."""

from __future__ import annotations

from collections.abc import Iterable

from inventory_demo.models import Item

ORDER_BY_VALUE_HEADER = "Inventory order by Value (ascending):"
VALIDATION_OK_LINE = "Binary search validation: All IDs resolved correctly."


def format_linear_search(item: Item | None, elapsed_ms: float) -> str:
    if item is None:
        return f"LinearSearchByName: Item not found in {elapsed_ms:.3f} ms"
    return f"LinearSearchByName found: {item.name} (ID:{item.id}, Value:{item.value}) in {elapsed_ms:.3f} ms"


def format_binary_search_existing(item: Item | None, elapsed_ms: float) -> str:
    if item is None:
        return f"BinarySearchByID (existing): Not found (unexpected) in {elapsed_ms:.3f} ms"
    return f"BinarySearchByID (existing) found: {item.name} (ID:{item.id}) in {elapsed_ms:.3f} ms"


def format_binary_search_missing(missing_id: int, item: Item | None, elapsed_ms: float) -> str:
    if item is None:
        return f"BinarySearchByID (missing) correctly did not find ID:{missing_id} in {elapsed_ms:.3f} ms"
    return f"BinarySearchByID (missing): Found unexpectedly in {elapsed_ms:.3f} ms"


def format_validation_failure(item_id: int) -> str:
    return f"Binary search failed for ID:{item_id}"


def format_quicksort_done(elapsed_ms: float) -> str:
    return f"QuickSortByValue completed in {elapsed_ms:.3f} ms."


def format_order_by_value(items: Iterable[Item]) -> str:
    lines = [ORDER_BY_VALUE_HEADER]
    for rank, item in enumerate(items, start=1):
        lines.append(f"#{rank}: {item.name} (ID:{item.id}, Value:{item.value})")
    return "\n".join(lines)
