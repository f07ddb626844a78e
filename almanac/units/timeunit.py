"""TimeUnit enumeration for the nine calendar units.

This module provides the TimeUnit enum, ordered from the coarsest unit
(YEAR) to the finest (NANOSECOND), plus the fixed sizes used when a unit
has one.
"""

from __future__ import annotations

from enum import Enum

from almanac._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
)


class TimeUnit(Enum):
    """Calendar units, from years down to nanoseconds.

    YEAR and MONTH have no fixed length (leap years, different month
    lengths); every other unit does.

    Examples:
        >>> TimeUnit.HOUR.nanos
        3600000000000

        >>> TimeUnit.MONTH.nanos is None
        True

        >>> TimeUnit.SECOND.coarser
        <TimeUnit.MINUTE: 'minute'>
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"

    @property
    def nanos(self) -> int | None:
        """Return the fixed length of one unit in nanoseconds.

        Returns:
            Length in nanoseconds, or None for YEAR and MONTH.
        """
        return _NANOS[self]

    @property
    def coarser(self) -> TimeUnit | None:
        """Return the next coarser unit, or None for YEAR."""
        index = COARSE_TO_FINE.index(self)
        return COARSE_TO_FINE[index - 1] if index > 0 else None

    @property
    def coarser_units(self) -> tuple[TimeUnit, ...]:
        """Return every unit coarser than this one, coarsest first."""
        return COARSE_TO_FINE[: COARSE_TO_FINE.index(self)]

    @property
    def is_sub_millisecond(self) -> bool:
        """Return True for units tracked on the fine (nanosecond) channel."""
        return self in (TimeUnit.MICROSECOND, TimeUnit.NANOSECOND)


COARSE_TO_FINE: tuple[TimeUnit, ...] = tuple(TimeUnit)

_NANOS: dict[TimeUnit, int | None] = {
    TimeUnit.YEAR: None,  # Variable length (leap years)
    TimeUnit.MONTH: None,  # Variable length
    TimeUnit.DAY: MILLIS_PER_DAY * NANOS_PER_MILLISECOND,
    TimeUnit.HOUR: MILLIS_PER_HOUR * NANOS_PER_MILLISECOND,
    TimeUnit.MINUTE: MILLIS_PER_MINUTE * NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: MILLIS_PER_SECOND * NANOS_PER_MILLISECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.NANOSECOND: 1,
}


__all__ = ["TimeUnit", "COARSE_TO_FINE"]
