from __future__ import annotations

import random
from collections.abc import Generator

import pytest

from inventory_demo.store import InventoryStore


@pytest.fixture()
def rng() -> random.Random:
    # Fixed seed keeps every test run identical.
    return random.Random(1234)


@pytest.fixture()
def store(rng: random.Random) -> InventoryStore:
    return InventoryStore.generate(count=25, rng=rng)


@pytest.fixture(autouse=True)
def _reset_startup_guard() -> Generator[None, None, None]:
    from inventory_demo.startup import reset_startup_for_tests

    reset_startup_for_tests()
    yield
    reset_startup_for_tests()
