from __future__ import annotations

import random
from collections.abc import Collection

from inventory_demo.models import ID_MAX, ID_MIN, ID_SPACE_SIZE, VALUE_MAX, VALUE_MIN, Item

DEFAULT_MAX_ID_ATTEMPTS = 10_000


class IdSpaceExhaustedError(ValueError):
    pass


def _draw_id(rng: random.Random) -> int:
    return rng.randrange(ID_MIN, ID_MAX)


def _attempt_budget(max_id_attempts: int, used: int) -> int:
    # A single draw hits a free id with probability free/space.
    return max_id_attempts * ID_SPACE_SIZE // (ID_SPACE_SIZE - used)


def _draw_unused_id(used_ids: Collection[int], rng: random.Random, budget: int) -> int | None:
    for _ in range(budget):
        item_id = _draw_id(rng)
        if item_id not in used_ids:
            return item_id
    return None


def generate_items(*, count: int, rng: random.Random, max_id_attempts: int = DEFAULT_MAX_ID_ATTEMPTS) -> list[Item]:
    """Build `count` items with unique random ids and random values.

    Names are sequential (`Item_0`, `Item_1`, ...). Ids are redrawn on collision.
    The retry bound per item is `max_id_attempts` scaled by how full the id space
    already is, so any count that fits the space succeeds with the default bound.
    """

    if count < 0:
        raise ValueError("count must be >= 0")
    if max_id_attempts < 1:
        raise ValueError("max_id_attempts must be >= 1")
    if count > ID_SPACE_SIZE:
        raise IdSpaceExhaustedError(f"Cannot draw {count} unique ids from a space of {ID_SPACE_SIZE}")

    used_ids: set[int] = set()
    items: list[Item] = []
    for i in range(count):
        budget = _attempt_budget(max_id_attempts, len(used_ids))
        item_id = _draw_unused_id(used_ids, rng, budget)
        if item_id is None:
            raise IdSpaceExhaustedError(f"No unique id found for Item_{i} after {budget} attempts")

        used_ids.add(item_id)
        items.append(Item(id=item_id, name=f"Item_{i}", value=rng.randint(VALUE_MIN, VALUE_MAX)))

    return items


def pick_missing_id(
    *,
    used_ids: Collection[int],
    rng: random.Random,
    max_attempts: int = DEFAULT_MAX_ID_ATTEMPTS,
) -> int:
    """Draw a random id in the item id range that is not in `used_ids`."""

    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    if len(used_ids) >= ID_SPACE_SIZE:
        raise IdSpaceExhaustedError("Every id is already in use")

    budget = _attempt_budget(max_attempts, len(used_ids))
    item_id = _draw_unused_id(used_ids, rng, budget)
    if item_id is None:
        raise IdSpaceExhaustedError(f"No missing id found after {budget} attempts")
    return item_id
