"""Tests for from_optional, try_evaluate and the capturing decorator."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from twotrack import Bad, Ok, capturing, from_optional, try_evaluate


class TestFromOptional:
    def test_present_value_succeeds_without_warnings(self):
        assert from_optional(42, "error") == Ok(42, ())

    def test_none_fails_with_given_error(self):
        assert from_optional(None, "error") == Bad(("error",))

    def test_falsy_values_are_present(self):
        for value in (0, "", [], False):
            assert from_optional(value, "error") == Ok(value)


class TestTryEvaluate:
    def test_normal_return_succeeds(self):
        assert try_evaluate(lambda: 42) == Ok(42, ())

    def test_none_return_still_succeeds(self):
        assert try_evaluate(lambda: None) == Ok(None)

    def test_raised_exception_becomes_sole_error(self):
        error = ZeroDivisionError("division by zero")

        def boom() -> int:
            raise error

        result = try_evaluate(boom)
        assert result.is_failure()
        assert result.failed_with() == (error,)
        assert result.failed_with()[0] is error

    def test_error_mapper_converts_exception(self):
        result = try_evaluate(lambda: int("old"), lambda e: f"not a number: {type(e).__name__}")
        assert result == Bad(("not a number: ValueError",))

    def test_thunk_runs_exactly_once(self):
        calls: list[int] = []
        try_evaluate(lambda: calls.append(1))
        assert calls == [1]

    def test_keyboard_interrupt_is_not_captured(self):
        def interrupt() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            try_evaluate(interrupt)

    def test_capture_is_logged_at_debug(self):
        with capture_logs() as logs:
            try_evaluate(lambda: {}["missing"])
        assert logs == [
            {
                "event": "result.exception_captured",
                "exception_type": "KeyError",
                "log_level": "debug",
            }
        ]


class TestCapturing:
    def test_decorated_function_returns_ok(self):
        @capturing
        def parse_age(raw: str) -> int:
            return int(raw)

        assert parse_age("41") == Ok(41)

    def test_decorated_function_returns_bad_on_exception(self):
        @capturing
        def parse_age(raw: str) -> int:
            return int(raw)

        result = parse_age(raw="old")
        assert isinstance(result.failed_with()[0], ValueError)

    def test_keeps_function_metadata(self):
        @capturing
        def parse_age(raw: str) -> int:
            """Parse an age."""
            return int(raw)

        assert parse_age.__name__ == "parse_age"
        assert parse_age.__doc__ == "Parse an age."
