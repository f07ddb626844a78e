"""Month enumeration and its helper functions.

Months are numbered 1 (January) through 12 (December), matching the
calendar field. As with weekdays, name handling is done by module
functions and never attached to the enum.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from almanac._internal.coerce import to_index
from almanac._internal.constants import MONTHS_IN_YEAR
from almanac.errors import ParseError


class Month(IntEnum):
    """Month of the year, January first."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


_ALIASES: dict[str, Month] = {}
for _month in Month:
    _ALIASES[_month.name.lower()] = _month
    _ALIASES[_month.name.lower()[:3]] = _month
del _month


def index_of(i: Any) -> Month:
    """Return the month at 0-based index ``i``, wrapping around the year.

    Examples:
        >>> index_of(0)
        <Month.JANUARY: 1>
        >>> index_of(-1)
        <Month.DECEMBER: 12>
    """
    return Month(to_index(i) % MONTHS_IN_YEAR + 1)


def position_of(p: Any) -> Month:
    """Return the month at 1-based position ``p``, wrapping around the year.

    Examples:
        >>> position_of(13)
        <Month.JANUARY: 1>
        >>> position_of(0)
        <Month.DECEMBER: 12>
    """
    return Month((to_index(p) - 1) % MONTHS_IN_YEAR + 1)


def to_string(m: Month) -> str:
    """Return the lower-case English name of a month."""
    return Month(m).name.lower()


def parse(s: str) -> Month:
    """Parse a month from its full or three-letter English name.

    Raises:
        ParseError: If the name is not recognized.
    """
    try:
        return _ALIASES[s.strip().lower()]
    except (AttributeError, KeyError):
        raise ParseError(f"Invalid month: {s!r}") from None


__all__ = ["Month", "index_of", "position_of", "to_string", "parse"]
