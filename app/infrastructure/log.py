"""Logger used for the operational lines the service writes to stdout."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "app.server"


def get_logger() -> logging.Logger:
    """Return the stdout logger, attaching its handler on first use.

    Lines are written bare (no timestamp or level) so that log scrapers see the
    message exactly as emitted.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "get_logger"]
