"""Synthetic inventory demo: linear search, binary search and quicksort over a small item set.

The store keeps an explicit order tag so binary search can sort lazily, only when
the items are not already ordered by id.
"""
