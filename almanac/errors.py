"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError. Each one also
inherits the closest builtin so callers can catch either.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class InvariantViolation(AlmanacError, RuntimeError):
    """An internal invariant does not hold.

    Raised when the library itself is misconfigured rather than when a
    caller passes bad input. Not recoverable.

    Examples:
        - The anchor table is empty
    """

    pass


class TypeMismatchError(AlmanacError, TypeError):
    """A value was compared or equated against an incompatible shape.

    Examples:
        - Instant.compare_to(42)
        - Span.equals("1 day")
        - CalendarSnapshot.compare_to(Instant(0))
    """

    pass


class ParseError(AlmanacError, ValueError):
    """Failed to parse a month, weekday or timezone name.

    Examples:
        - weekday.parse("funday")
        - month.parse("")
        - timezone.parse("Mars/Olympus")
    """

    pass


class ValidationError(AlmanacError, ValueError):
    """A calendar field is outside its valid range.

    Examples:
        - Month value outside 1-12
        - Day value outside the valid range for the month
        - Hour value outside 0-23
    """

    pass


__all__ = [
    "AlmanacError",
    "InvariantViolation",
    "TypeMismatchError",
    "ParseError",
    "ValidationError",
]
