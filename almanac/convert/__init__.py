"""Conversion between Instants and calendar values.

This module provides:
    - instant_to_calendar: Instant -> CalendarSnapshot (in UTC or LOCAL)
    - calendar_to_instant: CalendarFields -> Instant
    - weekday_of: the weekday of a set of calendar fields
    - The anchor table and the two nearest-anchor selectors

Examples:
    >>> from almanac.core.instant import Instant
    >>> from almanac.convert import instant_to_calendar, calendar_to_instant
    >>> snap = instant_to_calendar(Instant(1577836800000))
    >>> str(snap)
    '2020-01-01T00:00:00.000000000Z'
    >>> calendar_to_instant(snap.fields)
    Instant(coarse=1577836800000, fine=0)
"""

from __future__ import annotations

from almanac.convert.anchors import (
    ANCHORS,
    Anchor,
    NearestAnchor,
    nearest_anchor_by_calendar_year,
    nearest_anchor_by_instant,
)
from almanac.convert.instant import (
    calendar_to_instant,
    converged_seed,
    instant_to_calendar,
    weekday_of,
)

__all__ = [
    # Anchors
    "ANCHORS",
    "Anchor",
    "NearestAnchor",
    "nearest_anchor_by_instant",
    "nearest_anchor_by_calendar_year",
    # Conversion
    "instant_to_calendar",
    "calendar_to_instant",
    "converged_seed",
    "weekday_of",
]
