"""Logging setup for the payroll command line."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the ``payroll`` logger to write to the current stderr.

    Calling it again replaces the previous handler, so the logger always
    follows the stream the current command runs with.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown or missing names fall back to WARNING.

    Returns:
        The configured package logger
    """
    log_level = logging.WARNING
    if level:
        log_level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)

    logger = logging.getLogger("payroll")
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
