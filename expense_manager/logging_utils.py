"""Mini README: Application-wide logging helpers for the expense manager.

Structure:
    * configure_root_logger - installs a single formatted stream handler.
    * get_logger - module logger factory that guarantees baseline setup.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The CLI calls
    ``configure_root_logger`` with the configured level before the web service
    starts; repeated calls only adjust the level so reloads never stack handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once, updating only the level afterwards."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
