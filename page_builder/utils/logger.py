"""Central logging configuration for the page builder."""
from __future__ import annotations

import logging
from typing import Optional, Union

_DEFAULT_LEVEL = logging.INFO
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_ROOT_LOGGER_NAME = "page_builder"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_LOG_FORMAT)
    return logger


def set_level(level: Union[int, str]) -> None:
    """Adjust verbosity for every logger in the package."""
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(level)
