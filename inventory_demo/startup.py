from __future__ import annotations

import logging
import random
from pathlib import Path

from inventory_demo.config import DemoSettings, load_dotenv_if_present, settings_from_env
from inventory_demo.demo import DemoResult, run_demo

logger = logging.getLogger(__name__)

_RESULT: DemoResult | None = None


def run_demo_on_startup(*, settings: DemoSettings | None = None) -> DemoResult:
    """Run the demo once per process and cache the result.

    Later calls return the cached result without running anything.
    """

    global _RESULT
    if _RESULT is not None:
        logger.debug("demo already ran; skipping")
        return _RESULT

    if settings is None:
        settings = settings_from_env()

    _RESULT = run_demo(settings=settings, rng=random.Random(settings.seed))
    return _RESULT


def reset_startup_for_tests() -> None:
    """Forget the cached demo result so tests can trigger startup again."""

    global _RESULT
    _RESULT = None


def main() -> None:
    # project root is two levels up from this file: inventory_demo/startup.py
    load_dotenv_if_present(project_root=Path(__file__).resolve().parents[1])
    settings = settings_from_env()
    logging.basicConfig(level=settings.log_level)
    run_demo_on_startup(settings=settings)
