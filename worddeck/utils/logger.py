"""Logging setup shared by the UI and CLI entry points."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(name: str = "worddeck", level: Optional[int] = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Safe to call more than once: the stream handler is only attached
    the first time.

    Args:
        name: Logger name (children like "worddeck.services" inherit it)
        level: Logging level, defaults to INFO

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else logging.INFO)

    if not any(getattr(h, "_worddeck_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._worddeck_handler = True
        logger.addHandler(handler)

    return logger
