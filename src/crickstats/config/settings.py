"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "CRICKSTATS_DATA_DIR"
PAGE_LIMIT_ENV = "CRICKSTATS_DEFAULT_LIMIT"

_DEFAULT_DATA_DIR = Path("data")
_DEFAULT_PAGE_LIMIT = 20


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def default_data_dir() -> Path:
    env_dir = os.getenv(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return _DEFAULT_DATA_DIR


def default_page_limit() -> int:
    return _env_int(PAGE_LIMIT_ENV, _DEFAULT_PAGE_LIMIT, min_value=1)
