"""Root logger setup for both runtimes.

``TOPAZ_LOG_LEVEL`` (a level name or number) wins over everything else;
``TOPAZ_DEBUG`` set to a truthy value forces DEBUG when no level is given.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LEVEL_ENV = "TOPAZ_LOG_LEVEL"
DEBUG_ENV = "TOPAZ_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def parse_level(value: Union[int, str, None]) -> Optional[int]:
    """Return a numeric level for ``"debug"``, ``"20"`` or ``20``; else ``None``."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper()) if text else None
    return level if isinstance(level, int) else None


def env_level() -> Optional[int]:
    """Level forced by the environment, if any."""
    level = parse_level(os.getenv(LEVEL_ENV))
    if level is not None:
        return level
    if os.getenv(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: Union[int, str, None] = logging.INFO) -> int:
    """Configure the root logger with a compact format; return the level used."""
    level = env_level()
    if level is None:
        level = parse_level(default_level)
    if level is None:
        level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level


def apply_preferences(debug_enabled: bool) -> int:
    """Follow the persisted debug preference unless the environment decides."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG
