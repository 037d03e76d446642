from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Timed(Generic[T]):
    elapsed_ms: float
    result: T


def measure_ms(operation: Callable[[], T]) -> Timed[T]:
    """Call `operation` and return its result with the wall time it took, in milliseconds.

    Only the call itself is inside the measured interval.
    """

    start = time.perf_counter()
    result = operation()
    elapsed = time.perf_counter() - start
    return Timed(elapsed_ms=elapsed * 1000.0, result=result)
