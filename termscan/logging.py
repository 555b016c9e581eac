"""
Structured Logging

Configures Python logging to emit structured JSON logs.
Each log entry includes timestamp, level, module, and
any additional context fields attached by the matcher.

Usage:
    from termscan.logging import get_logger
    logger = get_logger("matcher")
    logger.info("Search complete", extra={"match_count": 2})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from termscan.config import settings


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Include extra fields
        for key in ("token_count", "term_count", "expanded_count",
                    "match_count", "pronoun_classes", "error"):
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str | None = None, fmt: str | None = None):
    """Configure the termscan logger. Call once at startup."""
    level = (level or settings.LOG_LEVEL).upper()
    fmt = fmt or settings.LOG_FORMAT

    root = logging.getLogger("termscan")
    root.setLevel(getattr(logging, level, logging.INFO))

    # Clear existing handlers
    root.handlers.clear()

    # stdout is reserved for demo output
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the termscan namespace."""
    return logging.getLogger(f"termscan.{name}")
