"""
Adapters — bring values from other error channels onto the two tracks.

  from_optional  None → Bad([error_if_absent]), anything else → Ok(value)
  try_evaluate   raised exception → Bad([exception]), return value → Ok(value)
  capturing      decorator form of try_evaluate

try_evaluate is the only place in twotrack where an exception becomes a value.
No combinator catches exceptions raised by the callbacks it is given.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import structlog

from twotrack.result import Bad, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
P = ParamSpec("P")

log = structlog.get_logger("twotrack.adapters")


def from_optional(value: T | None, error_if_absent: E) -> Result[T, E]:
    """
    Ok(value) unless `value` is None, in which case Bad([error_if_absent]).

        from_optional(config.get("port"), "port is required")
    """
    if value is None:
        return Bad((error_if_absent,))
    return Ok(value)


def try_evaluate(
    thunk: Callable[[], T],
    error_mapper: Callable[[Exception], E] | None = None,
) -> Result[T, Any]:
    """
    Evaluate `thunk`, capturing any raised Exception on the failure track.

    By default the exception object itself is the single error. Pass
    `error_mapper` to turn it into a message of your own error type.

    BaseException subclasses outside Exception (KeyboardInterrupt, SystemExit)
    are not captured.

        try_evaluate(lambda: int(raw))               # → Ok(42) or Bad([ValueError(...)])
        try_evaluate(lambda: int(raw), str)          # → Bad(["invalid literal ..."])
    """
    try:
        value = thunk()
    except Exception as e:
        log.debug("result.exception_captured", exception_type=type(e).__name__)
        return Bad((error_mapper(e) if error_mapper is not None else e,))
    return Ok(value)


def capturing(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """
    Decorate an exception-raising function so that it returns a Result instead.

        @capturing
        def parse_age(raw: str) -> int:
            return int(raw)

        parse_age("41")   # → Ok(41)
        parse_age("old")  # → Bad([ValueError(...)])
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return try_evaluate(lambda: fn(*args, **kwargs))

    return wrapper
