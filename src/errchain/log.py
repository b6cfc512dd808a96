"""Logging to stderr for the errchain command line."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "errchain"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the errchain logger, once."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)-7s %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    """Library code logs here; handlers are only attached by setup_logging."""
    return logging.getLogger(LOGGER_NAME)
