"""Tests for log formatters."""

import json
import logging
import sys

from ground_control.logging.context import clear_context, generate_correlation_id, set_extra_context
from ground_control.logging.formatters import HumanFormatter, JSONFormatter


def _make_record(message="test message", level=logging.INFO):
    """Create a test log record."""
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestJSONFormatter:
    def setup_method(self):
        clear_context()

    def test_outputs_valid_json(self):
        output = JSONFormatter().format(_make_record("hello world"))
        parsed = json.loads(output)
        assert parsed["message"] == "hello world"
        assert parsed["level"] == "INFO"

    def test_excludes_timestamp_when_disabled(self):
        parsed = json.loads(JSONFormatter(include_timestamp=False).format(_make_record()))
        assert "timestamp" not in parsed

    def test_includes_service_name(self):
        parsed = json.loads(JSONFormatter(service_name="console").format(_make_record()))
        assert parsed["service"] == "console"

    def test_location_toggle(self):
        with_location = json.loads(JSONFormatter().format(_make_record()))
        without_location = json.loads(JSONFormatter(include_location=False).format(_make_record()))
        assert with_location["line"] == 42
        assert "line" not in without_location

    def test_includes_correlation_id_and_context(self):
        corr_id = generate_correlation_id()
        set_extra_context(mission_id=9)
        parsed = json.loads(JSONFormatter().format(_make_record()))
        assert parsed["correlation_id"] == corr_id
        assert parsed["mission_id"] == 9
        clear_context()

    def test_includes_record_extras(self):
        record = _make_record()
        record.drop_reason = "unknown_task_type"
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["drop_reason"] == "unknown_task_type"

    def test_summarizes_binary_extras(self):
        record = _make_record()
        record.chunk = b"\x00\x01\x02"
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["chunk"] == "<3 bytes>"

    def test_keeps_non_ascii_text(self):
        output = JSONFormatter().format(_make_record("R=1.00µSv ✓ Last"))
        assert "µSv ✓ Last" in output

    def test_includes_exception_info(self):
        record = _make_record()
        try:
            raise ValueError("test error")  # noqa: TRY301
        except ValueError:
            record.exc_info = sys.exc_info()
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "test error"


class TestHumanFormatter:
    def setup_method(self):
        clear_context()

    def test_outputs_pipe_separated(self):
        output = HumanFormatter(use_colors=False).format(_make_record("hello world"))
        assert "|" in output
        assert "hello world" in output

    def test_includes_level(self):
        output = HumanFormatter(use_colors=False).format(_make_record(level=logging.WARNING))
        assert "WARNING" in output

    def test_colors_enabled(self):
        output = HumanFormatter(use_colors=True).format(_make_record())
        assert "\033[" in output

    def test_truncates_long_logger_name(self):
        record = _make_record()
        record.name = "ground_control.reports.factory.with.a.very.long.suffix"
        output = HumanFormatter(use_colors=False).format(record)
        assert "..." in output

    def test_includes_context_pairs(self):
        corr_id = generate_correlation_id()
        record = _make_record()
        record.error_code = "UNKNOWN_TASK_TYPE"
        output = HumanFormatter(use_colors=False).format(record)
        assert f"correlation_id={corr_id}" in output
        assert "error_code=UNKNOWN_TASK_TYPE" in output
        clear_context()
