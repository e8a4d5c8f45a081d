"""
Programming-misuse errors.

Domain failures never raise: they travel as Bad(errors) on the failure track.
The exceptions below signal a broken caller contract instead, such as building a
Bad with nothing in it, or reading the wrong track of a Result.

Both subclass ValueError, so existing `except ValueError` handlers keep working.
"""

from __future__ import annotations


class TwoTrackError(Exception):
    """Base class for every error raised by twotrack itself."""


class InvalidArgumentError(TwoTrackError, ValueError):
    """An operation received an argument it cannot accept (e.g. an empty error sequence)."""


class InvalidStateError(TwoTrackError, ValueError):
    """A Result was accessed on the track it is not on."""
