"""Shared logging utilities for consistent client observability.

Usage example:
    from stronggrid.observability.logging import get_logger

    logger = get_logger("stronggrid.infrastructure.http")
    logger.warning("Retrying %s in %.2fs", url, delay)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a client logger configured for UTC timestamps on stderr.

    Args:
        name: Logger name (use a stable module-qualified name).
        level: Level applied the first time this name is configured.

    Returns:
        A logger with exactly one stream handler, however often it is requested.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
    formatter.converter = time.gmtime
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
