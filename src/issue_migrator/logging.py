"""Logging setup for migration runs.

Records are JSON lines by default so a live run leaves a machine-readable
trail of every issue created or closed. `LOG_FORMAT=text` switches to a plain
format for interactive use.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, Literal

LogFormat = Literal["json", "text"]

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s%(context)s"

# Context keys hoisted to the top level of each JSON line.
ISSUE_CONTEXT_KEYS = ("repo", "source_repo", "target_repo", "issue_number", "dry_run")

_STANDARD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {
    "message",
    "asctime",
    "context",
}


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Fields passed through ``extra=`` on a logging call."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record, issue context first."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = _record_context(record)
        for key in ISSUE_CONTEXT_KEYS:
            if key in context:
                payload[key] = context.pop(key)
        if context:
            payload["extra"] = context

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Plain text with any ``extra=`` fields appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        context = _record_context(record)
        record.context = (
            " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]" if context else ""
        )
        return super().format(record)


def configure_logging(level: str, log_format: LogFormat = "json") -> None:
    """Route all records to stdout in the chosen format."""

    root = logging.getLogger()

    # Re-configuring must not stack handlers.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter() if log_format == "json" else TextFormatter())

    root.addHandler(handler)
    root.setLevel(level.upper())

    logging.getLogger("urllib3").setLevel(max(root.level, logging.WARNING))
