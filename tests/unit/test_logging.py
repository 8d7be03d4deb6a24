"""Unit tests for structured logging."""

from __future__ import annotations

import io
import json
import logging

import pytest

from task_tracker.tracker.logging import JsonFormatter, configure_logging
from task_tracker.tracker.store import TaskStore


def test_json_formatter_includes_extra() -> None:
    record = logging.LogRecord(
        name="task_tracker.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Task %s",
        args=("created",),
        exc_info=None,
    )
    record.task_id = 7

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "task_tracker.test"
    assert payload["message"] == "Task created"
    assert payload["extra"] == {"task_id": 7}
    assert "timestamp" in payload


def test_configure_logging_emits_json_lines(restore_root_logging: None) -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    store = TaskStore()
    store.create("Buy milk")
    store.complete(1)

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    messages = [line["message"] for line in lines]
    assert messages == ["Task created", "Task completed"]
    assert lines[0]["extra"] == {"task_id": 1, "title": "Buy milk"}
    assert logging.getLogger().level == logging.DEBUG


def test_store_warns_on_blank_title(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="task_tracker.tracker.store"):
        TaskStore().create("  ")

    assert "blank title" in caplog.text
