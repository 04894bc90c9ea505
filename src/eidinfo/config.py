"""
eidinfo Configuration

Environment settings and logging setup.

Environment variables:
- EIDINFO_LOG_LEVEL: level for the "eidinfo" logger (default WARNING)

The library never configures logging on import; applications call
configure_logging() if they want eidinfo's structured output.
"""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

__all__ = [
    'LOGGER_NAME',
    'DEFAULT_LOG_LEVEL',
    'get_log_level',
    'JSONFormatter',
    'configure_logging',
]

LOGGER_NAME = "eidinfo"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    """Log level name from EIDINFO_LOG_LEVEL."""
    return os.getenv("EIDINFO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Builder records name the tag, never the value
        if hasattr(record, "tag"):
            log_entry["tag"] = record.tag
        return json.dumps(log_entry)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the "eidinfo" logger.

    Calling it again replaces the handler installed by the previous call
    instead of adding another one.

    Args:
        level: Level name; falls back to EIDINFO_LOG_LEVEL

    Returns:
        The configured "eidinfo" logger
    """
    level_name = (level or get_log_level()).upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger
