"""
Message accumulation rules shared by every combinator that merges two Results.

    Ok(a, w1)  + Ok(b, w2)   → warnings  w1 ++ w2
    Ok(a, w1)  + Bad(e2)     → errors    e2          (w1 is provisional, dropped)
    Bad(e1)    + Ok(b, w2)   → errors    e1          (w2 is provisional, dropped)
    Bad(e1)    + Bad(e2)     → errors    e1 ++ e2    (accumulating combinators only)

Sequences are stored as tuples so a Result can never be mutated through them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

E = TypeVar("E")

type Messages[M] = tuple[M, ...]


def freeze(messages: Iterable[E]) -> Messages[E]:
    """Snapshot an iterable of messages into an immutable, ordered tuple."""
    if isinstance(messages, tuple):
        return messages
    if isinstance(messages, (str, bytes)):
        # A bare string is one message, not a sequence of characters.
        return (messages,)  # type: ignore[return-value]
    return tuple(messages)


def concat(*sequences: Iterable[E]) -> Messages[E]:
    """Concatenate message sequences left to right, preserving order."""
    merged: list[E] = []
    for seq in sequences:
        merged.extend(freeze(seq))
    return tuple(merged)


def truncate(messages: Messages[E], limit: int) -> list[E | str]:
    """First `limit` messages, plus a marker telling how many were left out."""
    if len(messages) <= limit:
        return list(messages)
    hidden = len(messages) - limit
    return [*messages[:limit], f"... {hidden} more"]
