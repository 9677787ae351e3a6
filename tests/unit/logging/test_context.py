"""Tests for logging context management."""

from ground_control.logging.context import (
    clear_context,
    generate_correlation_id,
    get_correlation_id,
    get_extra_context,
    set_extra_context,
)


class TestCorrelationId:
    def test_default_empty(self):
        clear_context()
        assert get_correlation_id() == ""

    def test_generate_sets_new_id(self):
        result = generate_correlation_id()
        assert result
        assert get_correlation_id() == result
        clear_context()

    def test_generate_replaces_previous_id(self):
        first = generate_correlation_id()
        second = generate_correlation_id()
        assert first != second
        assert get_correlation_id() == second
        clear_context()


class TestExtraContext:
    def test_default_empty(self):
        clear_context()
        assert get_extra_context() == {}

    def test_merges_successive_calls(self):
        clear_context()
        set_extra_context(mission_id=7)
        set_extra_context(rover_id=2)
        assert get_extra_context() == {"mission_id": 7, "rover_id": 2}
        clear_context()

    def test_returns_copy(self):
        clear_context()
        set_extra_context(key="value")
        first = get_extra_context()
        first["key"] = "changed"
        assert get_extra_context()["key"] == "value"
        clear_context()


class TestClearContext:
    def test_clears_everything(self):
        generate_correlation_id()
        set_extra_context(key="value")
        clear_context()
        assert get_correlation_id() == ""
        assert get_extra_context() == {}
