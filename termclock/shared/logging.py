"""Logging configuration utilities."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Verbose third-party loggers kept at WARNING
QUIET_LOGGERS = ("aiohttp", "asyncio")


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging for termclock.

    The dashboard owns the whole terminal, so records normally go to a file.
    Without a file they go to stderr, which is only useful when the display
    is not running.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: File to append records to. None logs to stderr.
    """
    # Convert string to logging level
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        filename=log_file,
    )

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
