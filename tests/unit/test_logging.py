"""Unit tests for logging setup."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from issue_migrator.logging import JsonFormatter, TextFormatter, configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str = "Closing issue %s", args: tuple[object, ...] | None = (5,)) -> logging.LogRecord:
    return logging.LogRecord(
        name="issue_migrator.workflows",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_json_formatter_hoists_issue_context() -> None:
    record = _record()
    record.repo = "old-repo"
    record.issue_number = 5
    record.dry_run = True
    record.replacement = 42

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "issue_migrator.workflows"
    assert payload["message"] == "Closing issue 5"
    assert payload["repo"] == "old-repo"
    assert payload["issue_number"] == 5
    assert payload["dry_run"] is True
    assert payload["extra"] == {"replacement": 42}


def test_json_formatter_omits_extra_when_empty() -> None:
    payload = json.loads(JsonFormatter().format(_record("plain", None)))

    assert "extra" not in payload
    assert "repo" not in payload


def test_text_formatter_appends_context() -> None:
    record = _record()
    record.repo = "old-repo"
    record.issue_number = 5

    line = TextFormatter().format(record)

    assert "issue_migrator.workflows - INFO - Closing issue 5" in line
    assert line.endswith(" [repo=old-repo issue_number=5]")


def test_text_formatter_without_context() -> None:
    assert TextFormatter().format(_record("plain", None)).endswith("INFO - plain")


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_replaces_handlers() -> None:
    configure_logging("debug")
    configure_logging("warning")

    root = logging.getLogger()
    json_handlers = [h for h in root.handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(json_handlers) == 1
    assert root.level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_text_format() -> None:
    configure_logging("info", "text")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, TextFormatter)
