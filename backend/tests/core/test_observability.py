"""Structured Logging — JSON formatter surfaces domain extras."""

import json
import logging

from calculator.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "calculator.test", logging.INFO, __file__, 1, "Project created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "calculator.test"
    assert payload["message"] == "Project created"
    assert "timestamp" in payload


def test_json_formatter_includes_extras_when_present():
    payload = json.loads(JSONFormatter().format(_record(project_id=7, calculation_id=3)))
    assert payload["project_id"] == 7
    assert payload["calculation_id"] == 3
    assert "error_code" not in payload


def test_setup_logging_does_not_stack_handlers():
    original_level = logging.root.level
    setup_logging("DEBUG", "text")
    setup_logging("DEBUG", "json")
    ours = [h for h in logging.root.handlers if getattr(h, "_calculator_handler", False)]
    try:
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        for handler in ours:
            logging.root.removeHandler(handler)
        logging.root.setLevel(original_level)
