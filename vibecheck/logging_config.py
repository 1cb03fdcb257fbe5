"""
Logging configuration for vibecheck runs.

Diagnostics (skipped files, failed rule groups, unreadable config) go to
stderr so they never mix with report output on stdout. Structured mode
emits one JSON object per record.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Any

LOGGER_NAME = "vibecheck"

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """Formats records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Context passed through ``extra=``
        for field in ["file", "category", "rule"]:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["error"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def configure_logging(
    log_level: str = "WARNING",
    log_file: str | None = None,
    structured: bool = False,
) -> logging.Logger:
    """
    Configure the ``vibecheck`` logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a log file, rotated daily
        structured: Emit JSON lines instead of plain text

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False

    # Clear existing handlers so repeated calls do not duplicate output
    logger.handlers.clear()

    formatter: logging.Formatter
    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="D",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger
