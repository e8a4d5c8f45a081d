"""
Curry — turn an N-ary function into a chain of single-argument functions.

Result.apply only ever supplies one argument, so an N-ary constructor has to be
curried before it can be lifted onto the success track:

    Result.succeed(curry3(make_user)).apply(name).apply(age).apply(email)

One explicit function per arity (2 to 8). `curry(fn, arity)` picks from them;
the arity is always stated by the caller, never read from the signature.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from twotrack.errors import InvalidArgumentError

MAX_ARITY = 8


def curry2(fn: Callable[[Any, Any], Any]) -> Callable[[Any], Any]:
    return lambda a: lambda b: fn(a, b)


def curry3(fn: Callable[[Any, Any, Any], Any]) -> Callable[[Any], Any]:
    return lambda a: lambda b: lambda c: fn(a, b, c)


def curry4(fn: Callable[[Any, Any, Any, Any], Any]) -> Callable[[Any], Any]:
    return lambda a: lambda b: lambda c: lambda d: fn(a, b, c, d)


def curry5(fn: Callable[..., Any]) -> Callable[[Any], Any]:
    return lambda a: lambda b: lambda c: lambda d: lambda e: fn(a, b, c, d, e)


def curry6(fn: Callable[..., Any]) -> Callable[[Any], Any]:
    return lambda a: lambda b: lambda c: lambda d: lambda e: lambda f: fn(a, b, c, d, e, f)


def curry7(fn: Callable[..., Any]) -> Callable[[Any], Any]:
    return (
        lambda a: lambda b: lambda c: lambda d: lambda e: lambda f: lambda g: fn(
            a, b, c, d, e, f, g
        )
    )


def curry8(fn: Callable[..., Any]) -> Callable[[Any], Any]:
    return (
        lambda a: lambda b: lambda c: lambda d: lambda e: lambda f: lambda g: lambda h: fn(
            a, b, c, d, e, f, g, h
        )
    )


_CURRIED: dict[int, Callable[[Callable[..., Any]], Callable[[Any], Any]]] = {
    2: curry2,
    3: curry3,
    4: curry4,
    5: curry5,
    6: curry6,
    7: curry7,
    8: curry8,
}


def curry(fn: Callable[..., Any], arity: int) -> Callable[[Any], Any]:
    """
    Curry `fn`, which takes exactly `arity` positional arguments.

    Arity 1 returns `fn` itself. Raises InvalidArgumentError outside 1..8.

        >>> curry(lambda a, b, c: a + b + c, 3)("1")("2")("3")
        '123'
    """
    if arity == 1:
        return fn
    try:
        return _CURRIED[arity](fn)
    except KeyError:
        raise InvalidArgumentError(
            f"curry supports arities 1 to {MAX_ARITY}, got {arity}"
        ) from None
