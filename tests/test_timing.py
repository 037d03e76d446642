from __future__ import annotations

import time

from inventory_demo.timing import measure_ms


def test_returns_result_and_elapsed_ms() -> None:
    timed = measure_ms(lambda: 41 + 1)
    assert timed.result == 42
    assert timed.elapsed_ms >= 0.0


def test_operation_without_result() -> None:
    calls: list[int] = []
    timed = measure_ms(lambda: calls.append(1))
    assert timed.result is None
    assert calls == [1]


def test_elapsed_is_in_milliseconds() -> None:
    timed = measure_ms(lambda: time.sleep(0.02))
    assert timed.elapsed_ms >= 15.0
    assert timed.elapsed_ms < 5_000.0
