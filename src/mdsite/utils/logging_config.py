"""Logging configuration for mdsite entry points."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class ConsoleFormatter(logging.Formatter):
    """Human readable ``timestamp | LEVEL | logger | message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        message = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"
        extra = _extra_fields(record)
        if extra:
            message += " | " + " ".join(f"{key}={value}" for key, value in extra.items())
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including fields passed via ``extra=``."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_extra_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS}


def configure_logging(level: str | int = "INFO", *, json_output: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Calling this again replaces the previously installed handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_output else ConsoleFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_mdsite_handler", False):
            root.removeHandler(existing)
    handler._mdsite_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
