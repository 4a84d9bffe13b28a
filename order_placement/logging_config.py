# order_placement/logging_config.py
from __future__ import annotations
import logging
from typing import Optional, Union

from order_placement.config import get_settings

PACKAGE_LOGGER = "order_placement"
_HANDLER_NAME = "order_placement.stream"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.
    Falls back to settings.LOG_LEVEL when no level is given. Safe to call repeatedly:
    the handler is only added once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if level is None:
        level = get_settings().LOG_LEVEL
    if isinstance(level, str):
        level = level.strip().upper()
    logger.setLevel(level)

    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
