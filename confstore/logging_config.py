"""Logging setup for the ``confstore`` command line."""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "confstore"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach handlers to the package logger once; the root logger is left alone.

    ``level`` falls back to ``CONFSTORE_LOG_LEVEL`` (default WARNING). When
    ``CONFSTORE_LOG_FILE`` is set, records also go to a rotating file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or os.getenv("CONFSTORE_LOG_LEVEL", "WARNING")).upper())
    if logger.handlers:
        return logger

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    log_file = os.getenv("CONFSTORE_LOG_FILE")
    if log_file:
        rotating = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=2, encoding="utf-8")
        rotating.setFormatter(fmt)
        logger.addHandler(rotating)
    return logger
