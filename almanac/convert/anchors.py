"""Anchor table and nearest-anchor selection.

An anchor is a known calendar position (January 1st, midnight UTC) with
its weekday and exact Instant. Every conversion starts from the anchor
nearest its target, which bounds how far the steppers have to walk.

The table covers 1920 through 2020 in decade steps, most recent first.
Targets outside that range still convert correctly, just with more steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from almanac._internal.calendar import days_in_month, days_in_year
from almanac._internal.constants import ANCHOR_YEAR_WINDOW
from almanac.core.fields import CalendarFields
from almanac.core.instant import Instant
from almanac.core.span import Span
from almanac.errors import InvariantViolation
from almanac.units.weekday import Weekday

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Anchor:
    """A calendar position whose weekday and Instant are known exactly.

    Attributes:
        fields: The calendar position (UTC).
        weekday: Weekday of that date.
        millis: Milliseconds since the epoch; the fine channel is zero.
    """

    fields: CalendarFields
    weekday: Weekday
    millis: int

    @property
    def year(self) -> int:
        return self.fields.year

    @property
    def instant(self) -> Instant:
        """Return a fresh Instant for this anchor."""
        return Instant(self.millis, 0)


@dataclass(frozen=True)
class NearestAnchor:
    """An anchor together with the Span from it to a calendar target."""

    anchor: Anchor
    span: Span


# (year, weekday of January 1st, epoch milliseconds), most recent first
_ANCHOR_TABLE: tuple[tuple[int, int, int], ...] = (
    (2020, 3, 1577836800000),
    (2010, 5, 1262304000000),
    (2000, 6, 946684800000),
    (1990, 1, 631152000000),
    (1980, 2, 315532800000),
    (1970, 4, 0),
    (1960, 5, -315619200000),
    (1950, 0, -631152000000),
    (1940, 1, -946771200000),
    (1930, 3, -1262304000000),
    (1920, 4, -1577923200000),
)


def _new_year_anchor(year: int, weekday: int, millis: int) -> Anchor:
    return Anchor(CalendarFields(year, 1, 1), Weekday(weekday), millis)


ANCHORS: tuple[Anchor, ...] = tuple(
    _new_year_anchor(year, weekday, millis) for year, weekday, millis in _ANCHOR_TABLE
)


def _require_anchors(anchors: Sequence[Anchor]) -> None:
    if not anchors:
        raise InvariantViolation("anchor selection requires at least one anchor")


def _closest(deltas: list[int]) -> int:
    """Return the index of the smallest absolute delta, first one wins."""
    return min(range(len(deltas)), key=lambda i: abs(deltas[i]))


def nearest_anchor_by_instant(
    target: Instant,
    anchors: Sequence[Anchor] = ANCHORS,
) -> tuple[Anchor, int]:
    """Find the anchor closest to ``target`` on the millisecond channel.

    The scan runs from the most recent anchor backwards. It stops at once
    if the target is at or after the newest anchor, and otherwise stops
    as soon as the target lies past the midpoint between the current
    anchor and the next older one. Beyond the oldest anchor the oldest
    one is used.

    Args:
        target: The Instant to convert.
        anchors: Anchor table ordered most recent first.

    Returns:
        Tuple of (anchor, target.coarse - anchor.millis).

    Raises:
        InvariantViolation: If the anchor table is empty.

    Examples:
        >>> anchor, delta = nearest_anchor_by_instant(Instant(1577836800000))
        >>> anchor.year, delta
        (2020, 0)
    """
    _require_anchors(anchors)

    deltas: list[int] = []
    for index, anchor in enumerate(anchors):
        deltas.append(target.coarse - anchor.millis)
        if index == 0 and target.coarse >= anchor.millis:
            break
        if index + 1 < len(anchors):
            older = anchors[index + 1]
            midpoint = older.millis + ((anchor.millis - older.millis) >> 1)
            if target.coarse >= midpoint:
                break

    best = _closest(deltas)
    logger.debug(
        "anchor %d chosen for instant %r after %d candidates (delta %d ms)",
        anchors[best].year,
        target,
        len(deltas),
        deltas[best],
    )
    return anchors[best], deltas[best]


def nearest_anchor_by_calendar_year(
    fields: CalendarFields,
    anchors: Sequence[Anchor] = ANCHORS,
) -> NearestAnchor:
    """Find the anchor closest to ``fields`` by year and measure the way there.

    The scan runs from the most recent anchor backwards and stops at the
    first anchor whose year is at or before the target's (only checked for
    the newest anchor) or within ANCHOR_YEAR_WINDOW years of it.

    The returned Span is built by walking whole years from the anchor,
    then whole months, accumulating their day counts. The remaining
    fields (day through nanosecond) contribute ``target - anchor`` only
    where the target's value is larger than the anchor's. Anchors sit at
    January 1st midnight, so with the built-in table this is always the
    plain difference.

    Args:
        fields: The calendar target (its timezone is ignored here).
        anchors: Anchor table ordered most recent first.

    Returns:
        The chosen anchor and the Span from it to the target.

    Raises:
        InvariantViolation: If the anchor table is empty.
    """
    _require_anchors(anchors)

    deltas: list[int] = []
    for index, anchor in enumerate(anchors):
        delta = fields.year - anchor.year
        deltas.append(delta)
        if index == 0 and delta >= 0:
            break
        if abs(delta) <= ANCHOR_YEAR_WINDOW:
            break

    best = _closest(deltas)
    anchor = anchors[best]
    origin = anchor.fields
    years = deltas[best]

    days = 0
    year = origin.year
    if years >= 0:
        for _ in range(years):
            days += days_in_year(year)
            year += 1
    else:
        for _ in range(-years):
            year -= 1
            days -= days_in_year(year)

    month = origin.month
    while month < fields.month:
        days += days_in_month(year, month)
        month += 1

    def gain(name: str) -> int:
        start, end = getattr(origin, name), getattr(fields, name)
        return end - start if start < end else 0

    span = Span(
        days=days + gain("day"),
        hours=gain("hour"),
        minutes=gain("minute"),
        seconds=gain("second"),
        milliseconds=gain("millisecond"),
        microseconds=gain("microsecond"),
        nanoseconds=gain("nanosecond"),
    )
    logger.debug("anchor %d chosen for year %d, span %r", anchor.year, fields.year, span)
    return NearestAnchor(anchor, span)


__all__ = [
    "Anchor",
    "ANCHORS",
    "NearestAnchor",
    "nearest_anchor_by_instant",
    "nearest_anchor_by_calendar_year",
]
