"""Logging setup for the analog_clock logger tree."""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "analog_clock"

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_console: bool = True,
) -> None:
    """
    Route package log records to the console and, optionally, a file.

    Calling this again replaces the previous handlers.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: File to append records to; parent directories are created
        enable_console: Write records to stderr
    """
    level = getattr(logging, log_level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = []
    if enable_console:
        # stderr keeps stdout free for `analog-clock render`
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger under `analog_clock`; module names already inside it are used as is."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
