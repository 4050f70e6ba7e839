"""Mini README: Application-wide logging helpers for Finstatements.

Structure:
    * get_logger - factory returning module loggers with baseline setup.
    * configure_root_logger - one-time root configuration.

Usage:
    Modules keep a module-level ``LOGGER = get_logger(__name__)``. The root
    handler is installed once per process; when no level is passed the
    ``FINSTATEMENTS_LOG_LEVEL`` setting decides it. Calling
    ``configure_root_logger`` again with an explicit level only adjusts the
    level, so the launcher can honour the configured value after modules
    have already created their loggers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Optional[Union[int, str]]) -> Union[int, str]:
    if level is not None:
        return level
    from .configuration import get_settings

    return get_settings().log_level


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the timestamped root handler, or update its level if present."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.setLevel(_resolve_level(level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
