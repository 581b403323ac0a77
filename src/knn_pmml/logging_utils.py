"""
Logging helpers for the exporter.
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "knn_pmml"
LOG_LEVEL_ENV = "KNN_PMML_LOG_LEVEL"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "WARNING")


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger to write to stderr.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...). Defaults to
            ``$KNN_PMML_LOG_LEVEL`` or WARNING.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = default_log_level()
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
