"""Textbook search and sort routines over item lists.

These are pure list operations. Order bookkeeping lives in `inventory_demo.store`.
"""

from inventory_demo.algorithms.search import binary_search_by_id, linear_search_by_name
from inventory_demo.algorithms.sorting import fisher_yates_shuffle, partition_by_value, quicksort_by_value, swap

__all__ = [
    "binary_search_by_id",
    "fisher_yates_shuffle",
    "linear_search_by_name",
    "partition_by_value",
    "quicksort_by_value",
    "swap",
]
