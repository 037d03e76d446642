from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from inventory_demo.config import DemoSettings
from inventory_demo.generation import pick_missing_id
from inventory_demo.models import Item
from inventory_demo.report import (
    format_binary_search_existing,
    format_binary_search_missing,
    format_linear_search,
    format_quicksort_done,
)
from inventory_demo.store import InventoryStore, ValidationReport
from inventory_demo.timing import measure_ms

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DemoResult:
    linear_match: Item | None
    existing_id: int | None
    existing_match: Item | None
    missing_id: int
    missing_match: Item | None
    validation: ValidationReport
    final_items: tuple[Item, ...]


def run_demo(*, settings: DemoSettings, rng: random.Random) -> DemoResult:
    """Run one pass: generate, search, validate, shuffle, quicksort, log.

    All randomness comes from `rng`, so a seeded generator gives a reproducible run
    (timings aside).
    """

    store = InventoryStore.generate(count=settings.item_count, rng=rng, max_id_attempts=settings.max_id_attempts)

    linear = measure_ms(lambda: store.linear_search_by_name(settings.search_name))
    logger.info(format_linear_search(linear.result, linear.elapsed_ms))

    # Sample before sorting so the pick is uniform over generation order.
    existing_id = rng.choice(store.items).id if len(store) else None

    # Pay for the first sort outside the timed search.
    store.ensure_sorted_by_id()

    existing_match: Item | None = None
    if existing_id is not None:
        existing = measure_ms(lambda: store.binary_search_by_id(existing_id))
        existing_match = existing.result
        logger.info(format_binary_search_existing(existing.result, existing.elapsed_ms))

    missing_id = pick_missing_id(used_ids=store.ids(), rng=rng, max_attempts=settings.max_id_attempts)
    missing = measure_ms(lambda: store.binary_search_by_id(missing_id))
    logger.info(format_binary_search_missing(missing_id, missing.result, missing.elapsed_ms))

    validation = store.validate_binary_search()

    store.shuffle(rng=rng)
    quicksort = measure_ms(lambda: store.quicksort_by_value(log_sorted=False))
    logger.info(format_quicksort_done(quicksort.elapsed_ms))
    store.log_order_by_value()

    return DemoResult(
        linear_match=linear.result,
        existing_id=existing_id,
        existing_match=existing_match,
        missing_id=missing_id,
        missing_match=missing.result,
        validation=validation,
        final_items=store.items,
    )
