"""
Test assertions for Result values.

Expressive assert helpers that print both tracks clearly when they fail:

    from twotrack import ResultAssertions

    def test_ken_pays_five():
        ResultAssertions.assert_success_value(cost_to_enter(ken), 5)

    def test_dave_is_too_old():
        ResultAssertions.assert_failure(cost_to_enter(dave), ["Too old!"])
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from twotrack.messages import Messages
from twotrack.result import Result

T = TypeVar("T")
E = TypeVar("E")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T, E], message: str = "") -> T:
        """
        Assert the Result is Ok and return its value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Ok but got Bad({list(result.failed_with())!r}){context}"
        )
        return result.succeeded_with()

    @staticmethod
    def assert_success_value(
        result: Result[T, E],
        expected_value: Any,
        expected_warnings: Sequence[Any] | None = None,
    ) -> None:
        """Assert the Result is Ok with the given value (and warnings, if given)."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
        if expected_warnings is not None:
            ResultAssertions.assert_warnings(result, expected_warnings)

    @staticmethod
    def assert_warnings(result: Result[T, E], expected_warnings: Sequence[Any]) -> None:
        """Assert the Result is Ok and carries exactly these warnings, in order."""
        ResultAssertions.assert_success(result)
        actual = result.match(lambda _, warnings: list(warnings), lambda _: [])
        assert actual == list(expected_warnings), (
            f"Expected warnings {list(expected_warnings)!r} but got {actual!r}"
        )

    @staticmethod
    def assert_failure(
        result: Result[T, E],
        expected_errors: Sequence[Any] | None = None,
        message: str = "",
    ) -> Messages[E]:
        """
        Assert the Result is Bad, optionally with exactly these errors in order.

            errors = ResultAssertions.assert_failure(result, ["fail1", "fail2"])
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Bad but got Ok({result.succeeded_with()!r}){context}"
        )
        errors = result.failed_with()
        if expected_errors is not None:
            assert list(errors) == list(expected_errors), (
                f"Expected errors {list(expected_errors)!r} but got {list(errors)!r}{context}"
            )
        return errors

    @staticmethod
    def assert_failure_contains(result: Result[T, E], expected_error: Any) -> None:
        """Assert the Result is Bad and `expected_error` is among its errors."""
        errors = ResultAssertions.assert_failure(result)
        assert expected_error in errors, (
            f"Expected errors to contain {expected_error!r} but got {list(errors)!r}"
        )
