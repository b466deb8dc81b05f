"""Centralized logging helpers.

Every module logs through a child of the ``sentinel_array`` logger. Operations
only emit DEBUG records (rejected mutations, construction sizes), so nothing
is printed at the default INFO level.
"""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "sentinel_array"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATEFMT: Final = "%Y-%m-%d %H:%M:%S"


def get_logger(component: str | None = None, *, level: int = logging.INFO) -> logging.Logger:
    """Return the package logger for ``component``.

    A stream handler is attached the first time a name is requested; ``level``
    only applies on that first call.
    """
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
