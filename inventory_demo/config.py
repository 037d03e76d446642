from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from inventory_demo.generation import DEFAULT_MAX_ID_ATTEMPTS

ENV_PREFIX = "INVENTORY_DEMO_"


@dataclass(frozen=True, slots=True)
class DemoSettings:
    item_count: int = 12
    search_name: str = "Item_5"
    # None => seed from OS entropy.
    seed: int | None = None
    max_id_attempts: int = DEFAULT_MAX_ID_ATTEMPTS
    log_level: str = "INFO"


def _env(name: str) -> str | None:
    raw = os.environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_optional_int(name: str) -> int | None:
    raw = _env(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e


def _env_int(name: str, default: int) -> int:
    value = _env_optional_int(name)
    return default if value is None else value


def load_dotenv_if_present(*, project_root: Path) -> bool:
    """Load `<project_root>/.env` without overriding variables that are already set."""

    env_path = project_root / ".env"
    if not env_path.exists():
        return False

    from dotenv import load_dotenv

    return load_dotenv(dotenv_path=env_path, override=False)


def settings_from_env() -> DemoSettings:
    defaults = DemoSettings()

    max_id_attempts = _env_int("MAX_ID_ATTEMPTS", defaults.max_id_attempts)
    if max_id_attempts < 1:
        raise ValueError(f"{ENV_PREFIX}MAX_ID_ATTEMPTS must be >= 1, got {max_id_attempts}")

    log_level = (_env("LOG_LEVEL") or defaults.log_level).upper()
    if log_level not in logging.getLevelNamesMapping():
        allowed = ",".join(sorted(logging.getLevelNamesMapping()))
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {allowed}, got {log_level!r}")

    return DemoSettings(
        item_count=_env_int("ITEM_COUNT", defaults.item_count),
        search_name=_env("SEARCH_NAME") or defaults.search_name,
        seed=_env_optional_int("SEED"),
        max_id_attempts=max_id_attempts,
        log_level=log_level,
    )
