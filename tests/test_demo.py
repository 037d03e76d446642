from __future__ import annotations

import logging
import random
import re

import pytest

from inventory_demo.config import DemoSettings
from inventory_demo.demo import DemoResult, run_demo
from inventory_demo.generation import IdSpaceExhaustedError


def _run(caplog: pytest.LogCaptureFixture, settings: DemoSettings, seed: int = 42) -> DemoResult:
    with caplog.at_level(logging.INFO, logger="inventory_demo"):
        return run_demo(settings=settings, rng=random.Random(seed))


def test_default_run_logs_every_step_in_order(caplog: pytest.LogCaptureFixture) -> None:
    result = _run(caplog, DemoSettings())
    messages = caplog.messages

    assert len(messages) == 6
    assert re.fullmatch(r"LinearSearchByName found: Item_5 \(ID:\d{4}, Value:\d+\) in \d+\.\d{3} ms", messages[0])
    assert re.fullmatch(r"BinarySearchByID \(existing\) found: Item_\d+ \(ID:\d{4}\) in \d+\.\d{3} ms", messages[1])
    assert re.fullmatch(
        rf"BinarySearchByID \(missing\) correctly did not find ID:{result.missing_id} in \d+\.\d{{3}} ms",
        messages[2],
    )
    assert messages[3] == "Binary search validation: All IDs resolved correctly."
    assert re.fullmatch(r"QuickSortByValue completed in \d+\.\d{3} ms\.", messages[4])

    block = messages[5].split("\n")
    assert block[0] == "Inventory order by Value (ascending):"
    assert len(block) == 13
    for rank, (line, item) in enumerate(zip(block[1:], result.final_items), start=1):
        assert line == f"#{rank}: {item.name} (ID:{item.id}, Value:{item.value})"


def test_default_run_outcomes(caplog: pytest.LogCaptureFixture) -> None:
    result = _run(caplog, DemoSettings())

    assert result.linear_match is not None
    assert result.linear_match.name == "Item_5"
    assert result.existing_match is not None
    assert result.existing_match.id == result.existing_id
    assert result.missing_match is None
    assert result.missing_id not in {it.id for it in result.final_items}
    assert result.validation.ok
    assert result.validation.checked == 12

    values = [it.value for it in result.final_items]
    assert values == sorted(values)
    assert len(result.final_items) == 12


def test_linear_miss_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    result = _run(caplog, DemoSettings(search_name="Item_999"))
    assert result.linear_match is None
    assert re.fullmatch(r"LinearSearchByName: Item not found in \d+\.\d{3} ms", caplog.messages[0])


def test_empty_inventory_run_completes(caplog: pytest.LogCaptureFixture) -> None:
    result = _run(caplog, DemoSettings(item_count=0))

    assert result.existing_id is None
    assert result.final_items == ()
    assert caplog.messages[-1] == "Inventory order by Value (ascending):"


def test_seeded_runs_are_reproducible(caplog: pytest.LogCaptureFixture) -> None:
    a = _run(caplog, DemoSettings(), seed=5)
    b = _run(caplog, DemoSettings(), seed=5)

    assert a.final_items == b.final_items
    assert a.existing_id == b.existing_id
    assert a.missing_id == b.missing_id


def test_too_many_items_fails_explicitly(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(IdSpaceExhaustedError):
        _run(caplog, DemoSettings(item_count=9001))
