"""
Logging configuration for the report runner.

Standard output carries the report, so log records go to stderr.
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the root logger.

    Args:
        level: Minimum level that reaches the console

    Returns:
        The root logger
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
