from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from inventory_demo.algorithms.search import binary_search_by_id, linear_search_by_name
from inventory_demo.algorithms.sorting import fisher_yates_shuffle, quicksort_by_value
from inventory_demo.fsm import InventoryOrderFSM
from inventory_demo.generation import DEFAULT_MAX_ID_ATTEMPTS, generate_items
from inventory_demo.models import InventoryOrder, Item
from inventory_demo.report import VALIDATION_OK_LINE, format_order_by_value, format_validation_failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of resolving every stored id through binary search.

    - `checked`: how many ids were looked up.
    - `failed_ids`: ids that did not resolve to an item with the same id.
    """

    checked: int
    failed_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failed_ids


class InventoryStore:
    """Ordered item sequence plus an explicit order tag.

    The tag is driven by `InventoryOrderFSM`; every method that reorders the items
    fires the matching event so `binary_search_by_id` knows when it must sort first.
    """

    def __init__(self, items: Iterable[Item] = (), *, order: InventoryOrder = InventoryOrder.unordered):
        self._items: list[Item] = list(items)
        self._fsm = InventoryOrderFSM(order)

    @classmethod
    def generate(
        cls,
        *,
        count: int,
        rng: random.Random,
        max_id_attempts: int = DEFAULT_MAX_ID_ATTEMPTS,
    ) -> InventoryStore:
        return cls(generate_items(count=count, rng=rng, max_id_attempts=max_id_attempts))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    @property
    def order(self) -> InventoryOrder:
        return self._fsm.order

    @property
    def is_sorted_by_id(self) -> bool:
        return self.order == InventoryOrder.sorted_by_id

    def ids(self) -> set[int]:
        return {item.id for item in self._items}

    def _transition(self, event: str) -> None:
        before = self._fsm.order
        self._fsm.send(event)
        logger.debug("inventory order %s -> %s (%s)", before.value, self._fsm.order.value, event)

    def regenerate(self, *, count: int, rng: random.Random, max_id_attempts: int = DEFAULT_MAX_ID_ATTEMPTS) -> None:
        self._items = generate_items(count=count, rng=rng, max_id_attempts=max_id_attempts)
        self._transition("regenerate")

    def linear_search_by_name(self, name: str) -> Item | None:
        return linear_search_by_name(self._items, name)

    def ensure_sorted_by_id(self) -> bool:
        """Sort ascending by id unless already sorted. Returns True if a sort ran."""

        if self.is_sorted_by_id:
            return False
        self._items.sort(key=lambda item: item.id)
        self._transition("sort_by_id")
        return True

    def binary_search_by_id(self, item_id: int) -> Item | None:
        self.ensure_sorted_by_id()
        return binary_search_by_id(self._items, item_id)

    def validate_binary_search(self) -> ValidationReport:
        """Resolve every stored id through binary search and report mismatches.

        Mismatches are logged as warnings; they never stop the caller.
        """

        self.ensure_sorted_by_id()

        failed: list[int] = []
        for item in self._items:
            found = self.binary_search_by_id(item.id)
            if found is None or found.id != item.id:
                logger.warning(format_validation_failure(item.id))
                failed.append(item.id)

        logger.info(VALIDATION_OK_LINE)
        return ValidationReport(checked=len(self._items), failed_ids=tuple(failed))

    def shuffle(self, *, rng: random.Random) -> None:
        fisher_yates_shuffle(self._items, rng=rng)
        self._transition("shuffle")

    def quicksort_by_value(self, *, log_sorted: bool = True) -> None:
        """Quicksort the items ascending by value.

        With `log_sorted`, the resulting order is logged as one multi-line record.
        """

        if len(self._items) > 1:
            quicksort_by_value(self._items)
        self._transition("sort_by_value")

        if log_sorted:
            self.log_order_by_value()

    def format_order_by_value(self) -> str:
        return format_order_by_value(self._items)

    def log_order_by_value(self) -> None:
        logger.info(self.format_order_by_value())
