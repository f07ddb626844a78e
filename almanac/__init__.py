"""Almanac: exact Gregorian calendar arithmetic with nanosecond precision.

Almanac converts between a linear time coordinate (an Instant) and the
proleptic Gregorian calendar, and does carry-correct arithmetic on
calendar values without walking day by day across decades.

Core Types:
    Instant: Point in time (epoch milliseconds + sub-millisecond nanoseconds)
    Span: Duration in days, hours, ... nanoseconds
    CalendarFields: Validated calendar fields with a timezone tag
    CalendarSnapshot: Immutable calendar value with weekday and Instant

Units:
    Weekday: Day of the week (0=Sunday)
    Month: Month of the year (1=January)
    TimeZone: UTC or LOCAL (Asia/Jakarta, UTC+07:00)
    TimeUnit: The nine calendar units, YEAR to NANOSECOND

Conversion Functions:
    instant_to_calendar: Instant -> CalendarSnapshot
    calendar_to_instant: CalendarFields -> Instant
    weekday_of: Weekday of a set of calendar fields

Exceptions:
    AlmanacError: Base exception
    InvariantViolation: Library misconfiguration (empty anchor table)
    TypeMismatchError: Comparison against an incompatible value
    ParseError: Unknown month, weekday or timezone name
    ValidationError: Calendar field out of range

Example:
    >>> from almanac import CalendarSnapshot, Span, TimeUnit
    >>> snap = CalendarSnapshot(2024, 1, 31, 12)
    >>> str(snap.shifted(TimeUnit.MONTH, 1))
    '2024-02-29T12:00:00.000000000Z'
    >>> str(snap.plus(Span(hours=12)))
    '2024-02-01T00:00:00.000000000Z'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from almanac.core.fields import CalendarFields
from almanac.core.instant import Instant
from almanac.core.snapshot import CalendarSnapshot
from almanac.core.span import Span

# Units
from almanac.units.month import Month
from almanac.units.timeunit import TimeUnit
from almanac.units.timezone import TimeZone
from almanac.units.weekday import Weekday

# Conversion
from almanac.convert.instant import (
    calendar_to_instant,
    instant_to_calendar,
    weekday_of,
)

# Exceptions
from almanac.errors import (
    AlmanacError,
    InvariantViolation,
    ParseError,
    TypeMismatchError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarFields",
    "CalendarSnapshot",
    "Instant",
    "Span",
    # Units
    "Month",
    "TimeUnit",
    "TimeZone",
    "Weekday",
    # Conversion
    "instant_to_calendar",
    "calendar_to_instant",
    "weekday_of",
    # Exceptions
    "AlmanacError",
    "InvariantViolation",
    "TypeMismatchError",
    "ParseError",
    "ValidationError",
]
