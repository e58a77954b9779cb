"""Structured logging: JSON formatter fields and stderr handler."""

import json
import logging
import sys

from crm_bridge.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "crm_bridge.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "crm_bridge.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    out = json.loads(JSONFormatter().format(
        _record(tool_name="crm_list_tags", status_code=200, unrelated="x"),
    ))
    assert out["tool_name"] == "crm_list_tags"
    assert out["status_code"] == 200
    assert "unrelated" not in out


def test_setup_logging_writes_to_stderr():
    previous_level = logging.root.level
    handler = setup_logging("DEBUG", "text")
    try:
        assert handler.stream is sys.stderr
        assert logging.root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
