"""Mini README: Application-wide logging helpers for the shop catalog.

Structure:
    * get_logger - factory returning module loggers with baseline setup.
    * configure_root_logger - one-time root handler setup; accepts a level
      name such as ``"DEBUG"`` so it can be fed straight from settings.

Usage:
    Modules keep ``LOGGER = get_logger(__name__)`` at import time. The CLI
    calls ``configure_root_logger(settings.log_level)`` before serving; calls
    after the first one only adjust the level so the uvicorn reloader and
    repeated test imports never stack handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

# httpx logs every request at INFO; one listing per catalog request is noise.
_CHATTY_LIBRARIES = ("httpx", "httpcore")

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach a single timestamped stream handler to the root logger."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    for name in _CHATTY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
