"""
Logging configuration for the command-line interface. The library itself only
ever obtains loggers; it is up to applications to configure them.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_VARIABLE = "NAMEFACTORY_LOG_LEVEL"


def setup_logging(level: str | None = None) -> None:
    """
    Configure the package logger to write to standard error. Without an
    explicit level, the level is taken from the environment, or else defaults
    to warnings only.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_VARIABLE, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("namefactory")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(
        logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
