import json
import logging

from lombokgen.logging import CustomJsonFormatter, ContextFilter
from lombokgen.logging.filters import (
    clear_session_context,
    session_id_var,
    session_scope,
    set_session_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="sample %s",
        args=("value",),
        exc_info=None,
    )


def test_context_filter_stamps_package_fields():
    record = _record()
    assert ContextFilter().filter(record)
    assert record.package_name == "lombokgen"
    assert record.package_version


def test_context_filter_uses_session_context():
    set_session_context("run-1")
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert record.session_id == "run-1"
    finally:
        clear_session_context()


def test_set_session_context_generates_id():
    session_id = set_session_context()
    try:
        assert session_id
        assert session_id_var.get() == session_id
    finally:
        clear_session_context()


def test_session_scope_restores_previous_value():
    clear_session_context()
    with session_scope("scoped") as session_id:
        assert session_id == "scoped"
        assert session_id_var.get() == "scoped"
    assert session_id_var.get() is None


def test_json_formatter_includes_message_and_extras():
    record = _record()
    record.features = ["data", "builder"]
    ContextFilter().filter(record)
    payload = json.loads(CustomJsonFormatter().format(record))
    assert payload["message"] == "sample value"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["features"] == ["data", "builder"]
    assert payload["package_name"] == "lombokgen"
    assert "trace_id" not in payload
