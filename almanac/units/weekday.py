"""Weekday enumeration and its helper functions.

The enum carries only the numeric codes the calendar engine needs
(0=Sunday through 6=Saturday). Name handling lives in plain functions in
this module rather than on the enum itself.

Examples:
    >>> from almanac.units import weekday
    >>> weekday.parse("Wed")
    <Weekday.WEDNESDAY: 3>
    >>> weekday.to_string(weekday.Weekday.FRIDAY)
    'friday'
    >>> weekday.index_of(-1)
    <Weekday.SATURDAY: 6>
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from almanac._internal.coerce import to_index
from almanac._internal.constants import DAYS_IN_WEEK
from almanac.errors import ParseError


class Weekday(IntEnum):
    """Day of the week, Sunday first."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


_ALIASES: dict[str, Weekday] = {}
for _day in Weekday:
    _ALIASES[_day.name.lower()] = _day
    _ALIASES[_day.name.lower()[:3]] = _day
del _day


def index_of(i: Any) -> Weekday:
    """Return the weekday at 0-based index ``i``, wrapping around the week.

    Examples:
        >>> index_of(7)
        <Weekday.SUNDAY: 0>
        >>> index_of("10")
        <Weekday.WEDNESDAY: 3>
    """
    return Weekday(to_index(i) % DAYS_IN_WEEK)


def position_of(p: Any) -> Weekday:
    """Return the weekday at 1-based position ``p``, wrapping around the week.

    Position 1 is Sunday, position 7 is Saturday, position 0 wraps to
    Saturday.
    """
    return Weekday((to_index(p) - 1) % DAYS_IN_WEEK)


def to_string(w: Weekday) -> str:
    """Return the lower-case English name of a weekday."""
    return Weekday(w).name.lower()


def parse(s: str) -> Weekday:
    """Parse a weekday from its full or three-letter English name.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        ParseError: If the name is not recognized.
    """
    try:
        return _ALIASES[s.strip().lower()]
    except (AttributeError, KeyError):
        raise ParseError(f"Invalid weekday: {s!r}") from None


__all__ = ["Weekday", "index_of", "position_of", "to_string", "parse"]
