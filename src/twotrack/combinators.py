"""
Function-style combinators over Result.

Every method on Result has a free-function twin here for point-free code
(`functools.partial`, `map(...)` over lists of Results). On top of that:

  - lift / lift2: run a plain N-ary function over N Results, accumulating errors.
  - collect: turn many Results into one Result of a list, accumulating errors.

Short-circuiting and accumulating composition stay two separate families:
bind never accumulates, apply/join/lift/collect always do.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from twotrack.curry import curry
from twotrack.messages import Messages
from twotrack.result import Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


# ──────────────────────── Monadic ────────────────────────


def bind(result: Result[T, E], binder: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Short-circuiting chain; see Result.bind."""
    return result.bind(binder)


def map_result(result: Result[T, E], mapper: Callable[[T], U]) -> Result[U, E]:
    """See Result.map. Named to stay clear of the builtin."""
    return result.map(mapper)


def flatten(result: Result[Result[T, E], E]) -> Result[T, E]:
    return result.flatten()


# ──────────────────────── Applicative ────────────────────────


def apply(function: Result[Callable[[A], B], E], argument: Result[A, E]) -> Result[B, E]:
    """Accumulating application; see Result.apply."""
    return function.apply(argument)


def join(
    left: Result[A, E],
    right: Result[B, E],
    combine: Callable[[A, B], R],
) -> Result[R, E]:
    """Accumulating merge of two Results; see Result.join."""
    return left.join(right, combine)


def lift(fn: Callable[..., R], *results: Result[Any, E]) -> Result[R, E]:
    """
    Call `fn` with the values of `results` if all succeed, else gather every error.

    Arity is the number of Results given (1 to 8).

        lift(Request, validate_name(raw), validate_email(raw))
        # → Bad(['Name must not be blank', 'Email must not be blank'])
    """
    lifted: Result[Any, E] = Result.succeed(curry(fn, len(results)))
    for result in results:
        lifted = lifted.apply(result)
    return lifted


def lift2(fn: Callable[[A, B], R], first: Result[A, E], second: Result[B, E]) -> Result[R, E]:
    return lift(fn, first, second)


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Gather many Results into one.

    All Ok: Ok(values, all warnings in order). Any Bad: Bad(all errors in order),
    every successful operand's warnings dropped.

        collect([Result.succeed(1), Result.fail_with("e1"), Result.fail_with("e2")])
        # → Bad(['e1', 'e2'])
    """
    gathered: Result[list[T], E] = Result.succeed([])
    for result in results:
        gathered = gathered.map(lambda values: lambda value: [*values, value]).apply(result)
    return gathered


# ──────────────────────── Consumption ────────────────────────


def match(
    result: Result[T, E],
    on_success: Callable[[T, Messages[E]], R],
    on_failure: Callable[[Messages[E]], R],
) -> R:
    return result.match(on_success, on_failure)


def either(
    result: Result[T, E],
    on_success: Callable[[T, Messages[E]], R],
    on_failure: Callable[[Messages[E]], R],
) -> R:
    return result.either(on_success, on_failure)


def succeeded_with(result: Result[T, E]) -> T:
    return result.succeeded_with()


def failed_with(result: Result[T, E]) -> Messages[E]:
    return result.failed_with()
