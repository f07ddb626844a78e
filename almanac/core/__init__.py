"""Core calendar types.

This module provides the value types the engines work with:
    - Instant: a point in time (milliseconds + sub-millisecond nanoseconds)
    - Span: a carry-normalized duration in days and finer units
    - CalendarFields: validated calendar fields with a timezone tag
    - CalendarSeed: the mutable working register of the engines
    - CalendarSnapshot: the immutable public calendar value
"""

from __future__ import annotations

from almanac.core.fields import CalendarFields
from almanac.core.instant import Instant
from almanac.core.seed import CalendarSeed
from almanac.core.snapshot import CalendarSnapshot
from almanac.core.span import Span

__all__: list[str] = [
    "CalendarFields",
    "CalendarSeed",
    "CalendarSnapshot",
    "Instant",
    "Span",
]
