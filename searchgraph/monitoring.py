from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "searchgraph"

_HANDLER_NAME = "searchgraph-console"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again replaces the formatter and level instead of stacking
    a second handler.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)

    handler.setFormatter(logging.Formatter(config.format))
    logger.debug("Logging configured", extra={"level": config.level})
    return logger
