"""
Logging helpers for keytrust.
Library modules only get named loggers; output is opt-in via configure_logging.
"""

import json
import logging
import os
import sys
import time
from typing import Optional, TextIO


ROOT_LOGGER_NAME = "keytrust"

_FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s",
})
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a keytrust logger.

    The package logger carries a NullHandler so nothing is printed
    unless the application configures logging.

    Args:
        name: Dotted logger name under "keytrust"

    Returns:
        Logger instance
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def json_formatter() -> logging.Formatter:
    """JSON-shaped formatter with UTC timestamps."""
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    formatter.converter = time.gmtime
    return formatter


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    to_file: Optional[str] = None,
) -> logging.Logger:
    """
    Send keytrust log records to a stream and optionally a file.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Minimum level to emit
        stream: Output stream (defaults to stderr)
        to_file: Optional log file path

    Returns:
        The package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    formatter = json_formatter()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(to_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
