"""Structured logging — JSON formatter fields and setup idempotence."""

import json
import logging

from diary.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "diary.test", logging.INFO, __file__, 1, "stored %s", ("entry",), None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "diary.test"
    assert payload["message"] == "stored entry"
    assert "timestamp" in payload


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(entry_id=7, changes=1, unrelated="x"),
    ))
    assert payload["entry_id"] == 7
    assert payload["changes"] == 1
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "diary"]
    assert len(named) == 1
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.INFO
    logging.root.removeHandler(named[0])
