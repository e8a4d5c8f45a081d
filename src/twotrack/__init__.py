"""
twotrack — railway-oriented Results with warnings and accumulated errors.

A computation either succeeds with a value (plus any warnings collected on the
way) or fails with one or more errors. No exceptions in business logic.

    from twotrack import Result, curry3

    def check_age(p: Person) -> Result[Person, str]:
        if p.age < 18:
            return Result.fail_with("Too young!")
        if p.age > 40:
            return Result.fail_with("Too old!")
        return Result.succeed(p)

    # Short-circuit: the first failure wins, later checks never run
    fee = Result.succeed(p).bind(check_age).bind(check_clothes).map(price)

    # Accumulate: every independent check runs, every error is kept
    request = Result.succeed(curry2(Request)).apply(check_name(raw)).apply(check_email(raw))
"""

from twotrack.adapters import capturing, from_optional, try_evaluate
from twotrack.assertions import ResultAssertions
from twotrack.combinators import (
    apply,
    bind,
    collect,
    either,
    failed_with,
    flatten,
    join,
    lift,
    lift2,
    map_result,
    match,
    succeeded_with,
)
from twotrack.config import TwoTrackSettings
from twotrack.curry import curry, curry2, curry3, curry4, curry5, curry6, curry7, curry8
from twotrack.errors import InvalidArgumentError, InvalidStateError, TwoTrackError
from twotrack.observability import configure_from_settings, configure_structlog, log_outcome
from twotrack.result import Bad, Ok, Result, fail_with, fail_with_many, succeed, warn

__all__ = [
    "Result",
    "Ok",
    "Bad",
    "succeed",
    "warn",
    "fail_with",
    "fail_with_many",
    "bind",
    "map_result",
    "flatten",
    "apply",
    "join",
    "lift",
    "lift2",
    "collect",
    "match",
    "either",
    "succeeded_with",
    "failed_with",
    "curry",
    "curry2",
    "curry3",
    "curry4",
    "curry5",
    "curry6",
    "curry7",
    "curry8",
    "from_optional",
    "try_evaluate",
    "capturing",
    "TwoTrackError",
    "InvalidArgumentError",
    "InvalidStateError",
    "TwoTrackSettings",
    "configure_structlog",
    "configure_from_settings",
    "log_outcome",
    "ResultAssertions",
]

__version__ = "0.1.0"
