"""Conversion entry points between Instants and calendar values.

Instant -> calendar runs the convergence engine from the nearest anchor.
Calendar -> Instant needs no stepping: the anchor->target Span is added
to the anchor's Instant directly.

Instants are always UTC-based. A LOCAL calendar value describes the wall
clock at UTC+07:00, so its Instant is the wall clock minus the offset.
"""

from __future__ import annotations

import logging

from almanac._internal.constants import DAYS_IN_WEEK, NANOS_PER_MILLISECOND
from almanac.arithmetic.converge import converge
from almanac.convert.anchors import (
    nearest_anchor_by_calendar_year,
    nearest_anchor_by_instant,
)
from almanac.core.fields import CalendarFields
from almanac.core.instant import Instant
from almanac.core.seed import CalendarSeed
from almanac.core.snapshot import CalendarSnapshot
from almanac.errors import TypeMismatchError
from almanac.units.timezone import TimeZone, offset_millis
from almanac.units.weekday import Weekday

logger = logging.getLogger(__name__)


def _canonical(instant: Instant) -> Instant:
    """Fold the fine channel into ``[0, 1_000_000)``, carrying into coarse."""
    carry, fine = divmod(instant.fine, NANOS_PER_MILLISECOND)
    return Instant(instant.coarse + carry, fine)


def converged_seed(instant: Instant, timezone: TimeZone = TimeZone.UTC) -> CalendarSeed:
    """Return a seed whose fields are the wall clock of ``instant`` in ``timezone``.

    The seed's own Instant is that wall clock read as if it were UTC.
    """
    wall = _canonical(instant)
    wall.coarse += offset_millis(timezone)
    anchor, delta = nearest_anchor_by_instant(wall)
    logger.debug("converting %r from anchor %d (%d ms away)", instant, anchor.year, delta)
    return converge(CalendarSeed.from_anchor(anchor), wall)


def instant_to_calendar(
    instant: Instant,
    timezone: TimeZone = TimeZone.UTC,
) -> CalendarSnapshot:
    """Convert an Instant to a calendar snapshot.

    Args:
        instant: The point in time. A fine channel outside
            ``[0, 1_000_000)`` is carried into the millisecond channel first.
        timezone: Zone whose wall clock the snapshot shows.

    Returns:
        An immutable snapshot holding the fields, the weekday and the
        (canonical) Instant.

    Raises:
        TypeMismatchError: If instant is not an Instant.

    Examples:
        >>> snap = instant_to_calendar(Instant(1577836800000))
        >>> snap.year, snap.month, snap.day, snap.weekday.name
        (2020, 1, 1, 'WEDNESDAY')

        >>> instant_to_calendar(Instant(0), TimeZone.LOCAL).hour
        7
    """
    if not isinstance(instant, Instant):
        raise TypeMismatchError(
            f"expected Instant, got {type(instant).__name__}"
        )
    seed = converged_seed(instant, timezone)
    return CalendarSnapshot._from_internal(
        seed.to_fields(timezone), seed.weekday, _canonical(instant)
    )


def calendar_to_instant(fields: CalendarFields) -> Instant:
    """Convert calendar fields to an Instant.

    Args:
        fields: The calendar position; its timezone tag decides the offset
            removed to reach UTC.

    Returns:
        The Instant, with ``microsecond * 1000 + nanosecond`` on the fine
        channel.

    Examples:
        >>> calendar_to_instant(CalendarFields(2019, 12, 31, 15, 20, 52, 658, 789, 337))
        Instant(coarse=1577805652658, fine=789337)
    """
    nearest = nearest_anchor_by_calendar_year(fields)
    span = nearest.span
    coarse = (
        nearest.anchor.millis
        + span.total_milliseconds
        - offset_millis(fields.timezone)
    )
    return Instant(coarse, span.sub_millisecond_nanos)


def weekday_of(fields: CalendarFields) -> Weekday:
    """Return the weekday of the date in ``fields``.

    Examples:
        >>> weekday_of(CalendarFields(2024, 2, 29)).name
        'THURSDAY'
    """
    nearest = nearest_anchor_by_calendar_year(fields)
    return Weekday((nearest.anchor.weekday + nearest.span.days) % DAYS_IN_WEEK)


__all__ = [
    "instant_to_calendar",
    "calendar_to_instant",
    "converged_seed",
    "weekday_of",
]
