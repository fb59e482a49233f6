from __future__ import annotations

import logging
import os
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def default_difficulty() -> str:
    """Difficulty used when a request or CLI call does not name one."""
    return os.getenv('LIANLIANKAN_DEFAULT_DIFFICULTY', 'easy')


def log_level() -> int:
    if env_flag('LIANLIANKAN_DEBUG'):
        return logging.DEBUG
    name = os.getenv('LIANLIANKAN_LOG_LEVEL', 'INFO').upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """Installs a basic root handler. Only entrypoints call this; library modules never do."""
    logging.basicConfig(
        level=log_level() if level is None else level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
