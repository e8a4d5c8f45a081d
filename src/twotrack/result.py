"""
Result — the two-track value at the core of twotrack.

A Result[T, E] is either Ok(value: T, warnings: tuple[E, ...]) or
Bad(errors: tuple[E, ...]). Nothing here raises for a domain failure:
failures are values, and they travel down the second track.

    ┌───────────┐    bind     ┌───────────┐    bind     ┌──────────┐
    │ check_age │───Ok────────│ check_tie │───Ok────────│ price    │──→ Ok(fee, warnings)
    └─────┬─────┘             └─────┬─────┘             └─────┬────┘
          │ Bad                     │ Bad                     │ Bad
          └─────────────────────────┴─────────────────────────┴──→ Bad(errors)

Two families of composition live side by side:
  - bind / map / ensure short-circuit: the first Bad wins, later steps never run.
  - apply / join accumulate: every operand is already evaluated, and the errors
    of all failing operands are concatenated left to right.

Warnings are provisional: they survive only while every operand stays Ok.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from twotrack.errors import InvalidArgumentError, InvalidStateError
from twotrack.messages import Messages, concat, freeze

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
B = TypeVar("B")
F = TypeVar("F")
R = TypeVar("R")


class Result(Generic[T, E]):
    """
    Success-with-warnings or failure-with-errors.

    Only two concrete classes exist: Ok and Bad. Instances are frozen; every
    combinator returns a new Result.

    Usage:
        >>> Result.succeed(5).map(lambda x: x * 2)
        Ok(10)

        >>> Result.fail_with("bad input").map(lambda x: x * 2)
        Bad(['bad input'])

        >>> Result.fail_with("fail1").map(lambda a: lambda b: a + b).apply(Result.fail_with("fail2"))
        Bad(['fail1', 'fail2'])
    """

    __slots__ = ()

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def succeed(value: T, warnings: Iterable[E] = ()) -> Result[T, E]:
        """Put `value` on the success track, optionally with warnings."""
        return Ok(value, freeze(warnings))

    @staticmethod
    def warn(message: E, value: T) -> Result[T, E]:
        """Succeed with `value` and a single warning."""
        return Ok(value, (message,))

    @staticmethod
    def fail_with(error: E) -> Result[T, E]:
        """Put a single error on the failure track."""
        return Bad((error,))

    @staticmethod
    def fail_with_many(errors: Iterable[E]) -> Result[T, E]:
        """
        Put several errors on the failure track, in order.

        Raises InvalidArgumentError if `errors` is empty.
        """
        return Bad(freeze(errors))

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is on the success track."""
        return isinstance(self, Ok)

    def is_failure(self) -> bool:
        """Check if this Result is on the failure track."""
        return isinstance(self, Bad)

    def succeeded_with(self) -> T:
        """
        Extract the success value. Raises InvalidStateError on a Bad.

        Prefer .match() or match/case when either track is possible.
        """
        match self:
            case Ok(value):
                return value
            case Bad(errors):
                raise InvalidStateError(f"Cannot get value from a Bad result: {list(errors)!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def failed_with(self) -> Messages[E]:
        """
        Extract the error sequence. Raises InvalidStateError on an Ok.

        Prefer .match() or match/case when either track is possible.
        """
        match self:
            case Bad(errors):
                return errors
            case Ok(value):
                raise InvalidStateError(f"Cannot get errors from an Ok result: {value!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Consumption ────────────────────────

    def match(
        self,
        on_success: Callable[[T, Messages[E]], R],
        on_failure: Callable[[Messages[E]], R],
    ) -> R:
        """
        Run exactly one of two handlers, depending on the track.

            result.match(
                on_success=lambda fee, warnings: f"Pay {fee}",
                on_failure=lambda errors: "; ".join(errors),
            )
        """
        match self:
            case Ok(value, warnings):
                return on_success(value, warnings)
            case Bad(errors):
                return on_failure(errors)
        raise TypeError("unreachable")  # pragma: no cover

    def either(
        self,
        on_success: Callable[[T, Messages[E]], R],
        on_failure: Callable[[Messages[E]], R],
    ) -> R:
        """Expression form of .match(): both handlers return the same type."""
        return self.match(on_success, on_failure)

    def get_or_else(self, default: T) -> T:
        """Extract the value, or return `default` on a Bad."""
        match self:
            case Ok(value):
                return value
            case _:
                return default

    # ──────────────────────── Monadic Composition ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value, keeping warnings. A Bad passes through.

            Result.succeed(5).map(lambda x: x * 2)  # → Ok(10)
        """
        match self:
            case Ok(value, warnings):
                return Ok(mapper(value), warnings)
            case Bad(errors):
                return Bad(errors)
        raise TypeError("unreachable")  # pragma: no cover

    def bind(self, binder: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning step. Short-circuits on failure.

        On Ok(v, w1) the binder runs; Ok(u, w2) becomes Ok(u, w1 + w2) and a
        Bad from the binder is returned as is (w1 is dropped). On a Bad the
        binder is never called.

            def check_age(p: Person) -> Result[Person, str]:
                return Result.fail_with("Too old!") if p.age > 40 else Result.succeed(p)

            Result.succeed(dave).bind(check_age).bind(check_clothes)  # → Bad(['Too old!'])
        """
        match self:
            case Ok(value, warnings):
                match _expect_result(binder(value), "bind"):
                    case Ok(new_value, more):
                        return Ok(new_value, concat(warnings, more))
                    case Bad(errors):
                        return Bad(errors)
            case Bad(errors):
                return Bad(errors)
        raise TypeError("unreachable")  # pragma: no cover

    flat_map = bind

    def flatten(self: Result[Result[U, E], E]) -> Result[U, E]:
        """Collapse a nested Result[Result[U, E], E] into Result[U, E]."""
        return self.bind(lambda inner: inner)

    def ensure(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """
        Keep the value only if it satisfies `predicate`, else fail with `error`.
        Short-circuits on an existing failure.
        """
        return self.bind(lambda v: Ok(v) if predicate(v) else Bad((error,)))

    # ──────────────────────── Applicative Composition ────────────────────────

    def apply(self: Result[Callable[[Any], B], E], argument: Result[Any, E]) -> Result[B, E]:
        """
        Apply the function held by this Result to the value held by `argument`.

        Both operands already exist, so nothing is skipped:

            Ok(f, w1)  ⊛ Ok(a, w2)  → Ok(f(a), w1 + w2)
            Ok(f, _)   ⊛ Bad(e2)    → Bad(e2)
            Bad(e1)    ⊛ Ok(_, _)   → Bad(e1)
            Bad(e1)    ⊛ Bad(e2)    → Bad(e1 + e2)

        Feed an N-ary function one argument at a time after currying it:

            Result.succeed(curry3(Person)).apply(name).apply(age).apply(email)
        """
        match (self, _expect_result(argument, "apply")):
            case (Ok(function, left_warnings), Ok(value, right_warnings)):
                return Ok(function(value), concat(left_warnings, right_warnings))
            case (Ok(), Bad(right_errors)):
                return Bad(right_errors)
            case (Bad(left_errors), Ok()):
                return Bad(left_errors)
            case (Bad(left_errors), Bad(right_errors)):
                return Bad(concat(left_errors, right_errors))
        raise TypeError("unreachable")  # pragma: no cover

    def join(self, other: Result[B, E], combine: Callable[[T, B], R]) -> Result[R, E]:
        """
        Merge two independently computed Results with `combine`.

        Accumulates like .apply(): warnings concatenate on double success,
        errors concatenate on double failure.

            Result.succeed(1, ["added one"]).join(
                Result.succeed(2, ["added two"]), lambda a, b: a + b
            )  # → Ok(3, warnings=['added one', 'added two'])
        """
        return self.map(lambda a: lambda b: combine(a, b)).apply(other)

    # ──────────────────────── Messages ────────────────────────

    def merge_messages(self, messages: Iterable[E]) -> Result[T, E]:
        """Prepend `messages` to the warnings of an Ok. A Bad is returned unchanged."""
        match self:
            case Ok(value, warnings):
                return Ok(value, concat(messages, warnings))
            case Bad(errors):
                return Bad(errors)
        raise TypeError("unreachable")  # pragma: no cover

    def fail_on_warnings(self) -> Result[T, E]:
        """Turn an Ok that carries warnings into a Bad with those warnings as errors."""
        match self:
            case Ok(_, warnings) if warnings:
                return Bad(warnings)
            case Ok(value):
                return Ok(value)
            case Bad(errors):
                return Bad(errors)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform each error of a Bad. An Ok passes through, warnings untouched."""
        match self:
            case Ok(value, warnings):
                return Ok(value, warnings)  # type: ignore[arg-type]
            case Bad(errors):
                return Bad(tuple(mapper(e) for e in errors))
        raise TypeError("unreachable")  # pragma: no cover

    def map_messages(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform every message on either track: warnings of an Ok, errors of a Bad."""
        match self:
            case Ok(value, warnings):
                return Ok(value, tuple(mapper(w) for w in warnings))
            case Bad(errors):
                return Bad(tuple(mapper(e) for e in errors))
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T, E]:
        """
        Run a side effect on the success value, returning this Result.

            result.peek(lambda fee: log.info("admission.priced", fee=fee))
        """
        match self:
            case Ok(value):
                action(value)
        return self

    def peek_failure(self, action: Callable[[Messages[E]], Any]) -> Result[T, E]:
        """Run a side effect on the errors of a Bad, returning this Result."""
        match self:
            case Bad(errors):
                action(errors)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def recover(self, recovery_fn: Callable[[Messages[E]], T]) -> Result[T, E]:
        """Switch a Bad back onto the success track with a value computed from its errors."""
        match self:
            case Ok(value, warnings):
                return Ok(value, warnings)
            case Bad(errors):
                return Ok(recovery_fn(errors))
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Truthy only on the success track: `if result: ...`."""
        return self.is_success()


@dataclass(frozen=True, slots=True, repr=False)
class Ok(Result[T, E]):
    """The success track: a value plus the warnings gathered on the way."""

    value: T
    warnings: Messages[E] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "warnings", freeze(self.warnings))

    def __repr__(self) -> str:
        if not self.warnings:
            return f"Ok({self.value!r})"
        return f"Ok({self.value!r}, warnings={list(self.warnings)!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Bad(Result[T, E]):
    """The failure track: one or more errors, in the order they occurred."""

    errors: Messages[E]

    def __post_init__(self) -> None:
        errors = freeze(self.errors)
        if not errors:
            raise InvalidArgumentError("A Bad result needs at least one error")
        object.__setattr__(self, "errors", errors)

    def __repr__(self) -> str:
        return f"Bad({list(self.errors)!r})"


def _expect_result(candidate: object, operation: str) -> Result[Any, Any]:
    if not isinstance(candidate, Result):
        raise InvalidArgumentError(
            f"{operation} expects a Result, got {type(candidate).__name__}: {candidate!r}"
        )
    return candidate


def succeed(value: T, warnings: Iterable[E] = ()) -> Result[T, E]:
    """Module-level alias of Result.succeed."""
    return Result.succeed(value, warnings)


def warn(message: E, value: T) -> Result[T, E]:
    """Module-level alias of Result.warn."""
    return Result.warn(message, value)


def fail_with(error: E) -> Result[Any, E]:
    """Module-level alias of Result.fail_with."""
    return Result.fail_with(error)


def fail_with_many(errors: Iterable[E]) -> Result[Any, E]:
    """Module-level alias of Result.fail_with_many."""
    return Result.fail_with_many(errors)
