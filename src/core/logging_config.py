"""Logging configuration for the ray tracer."""

import logging
from typing import Optional

from core.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the root logger.

    Library modules only create loggers; the batch entry point calls this
    once so their records reach the console.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured LOG_LEVEL.

    Returns:
        The configured root logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    if not any(getattr(h, "_raytracer_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._raytracer_console = True
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)
    return logger
