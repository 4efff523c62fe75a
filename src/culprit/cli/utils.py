"""
Shared utility functions for the culprit CLI.
"""

from __future__ import annotations

import logging
import sys

from ..config import is_debug


def configure_logging(quiet: bool = False) -> logging.Logger:
    """
    Send culprit diagnostics to stderr.

    Priority:
    1. CULPRIT_DEBUG environment variable (DEBUG)
    2. --quiet (WARNING)
    3. INFO

    Returns:
        logging.Logger: The package logger that was configured
    """
    logger = logging.getLogger("culprit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    if is_debug():
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)
    return logger
