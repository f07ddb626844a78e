"""Single-unit steppers for CalendarSeed.

For each of the nine units there is a ``<unit>_next`` and ``<unit>_prev``
function. A step moves the unit's field by one; running past the field's
range resets it and carries into the next coarser unit.

With ``update=True`` (the default) a step also keeps the seed's weekday
and Instant in line with its fields:

- Year, month and day steps move the Instant by the exact number of days
  crossed and rotate the weekday by the same count.
- Hour through nanosecond steps move the Instant by their own size. When
  they carry into a coarser unit, that unit's step moves the Instant by
  its own (larger) size and rotates the weekday if a day boundary is
  crossed; the finer step then restores the Instant it computed before
  the carry.

With ``update=False`` only the fields move. Coarse steps use this when
they carry, having already accounted for the whole move.

Month and year steps clamp the day to the length of the month they land
in (January 31st plus one month is February 28th or 29th).
"""

from __future__ import annotations

from typing import Callable

from almanac._internal.calendar import days_in_month, days_in_year
from almanac._internal.constants import (
    DAYS_IN_WEEK,
    HOURS_IN_DAY,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MINUTES_IN_HOUR,
    MONTHS_IN_YEAR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_IN_MINUTE,
    SUBSECOND_RADIX,
)
from almanac.core.instant import Instant
from almanac.core.seed import CalendarSeed
from almanac.units.timeunit import TimeUnit
from almanac.units.weekday import Weekday

Stepper = Callable[..., CalendarSeed]


def _shifted(instant: Instant, millis: int = 0, nanos: int = 0) -> Instant:
    """Return ``instant`` moved by the given amount, fine channel carried."""
    carry, fine = divmod(instant.fine + nanos, NANOS_PER_MILLISECOND)
    return Instant(instant.coarse + millis + carry, fine)


def _cross_days(seed: CalendarSeed, days: int) -> None:
    """Advance the Instant by whole days and rotate the weekday to match."""
    seed.weekday = Weekday((seed.weekday + days) % DAYS_IN_WEEK)
    seed.instant = _shifted(seed.instant, millis=days * MILLIS_PER_DAY)


def _carry(
    seed: CalendarSeed,
    coarser: Stepper,
    update: bool,
    millis: int = 0,
    nanos: int = 0,
) -> None:
    """Carry a sub-day step into ``coarser`` without losing Instant exactness."""
    if not update:
        coarser(seed, False)
        return
    exact = _shifted(seed.instant, millis, nanos)
    coarser(seed, True)
    seed.instant = exact


# -- years ------------------------------------------------------------------


def year_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    """Step one year forward."""
    year = seed.year + 1
    day = min(seed.day, days_in_month(year, seed.month))
    if update:
        # Jan/Feb cross this year's February, later months next year's.
        crossed = days_in_year(seed.year if seed.month <= 2 else year)
        _cross_days(seed, crossed + day - seed.day)
    seed.year = year
    seed.day = day
    return seed


def year_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    """Step one year backward."""
    year = seed.year - 1
    day = min(seed.day, days_in_month(year, seed.month))
    if update:
        crossed = days_in_year(year if seed.month <= 2 else seed.year)
        _cross_days(seed, -crossed + day - seed.day)
    seed.year = year
    seed.day = day
    return seed


# -- months -----------------------------------------------------------------


def month_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    """Step one month forward, carrying into the year after December."""
    if seed.month < MONTHS_IN_YEAR:
        year, month = seed.year, seed.month + 1
    else:
        year, month = seed.year + 1, 1
    day = min(seed.day, days_in_month(year, month))
    if update:
        _cross_days(seed, days_in_month(seed.year, seed.month) + day - seed.day)

    if seed.month < MONTHS_IN_YEAR:
        seed.month += 1
    else:
        seed.month = 1
        year_next(seed, False)
    seed.day = day
    return seed


def month_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    """Step one month backward, borrowing from the year before January."""
    if seed.month > 1:
        year, month = seed.year, seed.month - 1
    else:
        year, month = seed.year - 1, MONTHS_IN_YEAR
    day = min(seed.day, days_in_month(year, month))
    if update:
        _cross_days(seed, -days_in_month(year, month) + day - seed.day)

    if seed.month > 1:
        seed.month -= 1
    else:
        seed.month = MONTHS_IN_YEAR
        year_prev(seed, False)
    seed.day = day
    return seed


# -- days -------------------------------------------------------------------


def day_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    """Step one day forward, carrying into the month at month end."""
    if update:
        _cross_days(seed, 1)
    if seed.day < days_in_month(seed.year, seed.month):
        seed.day += 1
        return seed
    seed.day = 1
    month_next(seed, False)
    return seed


def day_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    """Step one day backward, borrowing the previous month's last day."""
    if update:
        _cross_days(seed, -1)
    if seed.day > 1:
        seed.day -= 1
        return seed
    month_prev(seed, False)
    seed.day = days_in_month(seed.year, seed.month)
    return seed


# -- time of day ------------------------------------------------------------


def hour_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.hour < HOURS_IN_DAY - 1:
        seed.hour += 1
        if update:
            seed.instant = _shifted(seed.instant, millis=MILLIS_PER_HOUR)
        return seed
    seed.hour = 0
    _carry(seed, day_next, update, millis=MILLIS_PER_HOUR)
    return seed


def hour_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.hour > 0:
        seed.hour -= 1
        if update:
            seed.instant = _shifted(seed.instant, millis=-MILLIS_PER_HOUR)
        return seed
    seed.hour = HOURS_IN_DAY - 1
    _carry(seed, day_prev, update, millis=-MILLIS_PER_HOUR)
    return seed


def minute_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.minute < MINUTES_IN_HOUR - 1:
        seed.minute += 1
        if update:
            seed.instant = _shifted(seed.instant, millis=MILLIS_PER_MINUTE)
        return seed
    seed.minute = 0
    _carry(seed, hour_next, update, millis=MILLIS_PER_MINUTE)
    return seed


def minute_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.minute > 0:
        seed.minute -= 1
        if update:
            seed.instant = _shifted(seed.instant, millis=-MILLIS_PER_MINUTE)
        return seed
    seed.minute = MINUTES_IN_HOUR - 1
    _carry(seed, hour_prev, update, millis=-MILLIS_PER_MINUTE)
    return seed


def second_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.second < SECONDS_IN_MINUTE - 1:
        seed.second += 1
        if update:
            seed.instant = _shifted(seed.instant, millis=MILLIS_PER_SECOND)
        return seed
    seed.second = 0
    _carry(seed, minute_next, update, millis=MILLIS_PER_SECOND)
    return seed


def second_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.second > 0:
        seed.second -= 1
        if update:
            seed.instant = _shifted(seed.instant, millis=-MILLIS_PER_SECOND)
        return seed
    seed.second = SECONDS_IN_MINUTE - 1
    _carry(seed, minute_prev, update, millis=-MILLIS_PER_SECOND)
    return seed


# -- sub-second -------------------------------------------------------------


def millisecond_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.millisecond < SUBSECOND_RADIX - 1:
        seed.millisecond += 1
        if update:
            seed.instant = _shifted(seed.instant, millis=1)
        return seed
    seed.millisecond = 0
    _carry(seed, second_next, update, millis=1)
    return seed


def millisecond_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.millisecond > 0:
        seed.millisecond -= 1
        if update:
            seed.instant = _shifted(seed.instant, millis=-1)
        return seed
    seed.millisecond = SUBSECOND_RADIX - 1
    _carry(seed, second_prev, update, millis=-1)
    return seed


def microsecond_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.microsecond < SUBSECOND_RADIX - 1:
        seed.microsecond += 1
        if update:
            seed.instant = _shifted(seed.instant, nanos=NANOS_PER_MICROSECOND)
        return seed
    seed.microsecond = 0
    _carry(seed, millisecond_next, update, nanos=NANOS_PER_MICROSECOND)
    return seed


def microsecond_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.microsecond > 0:
        seed.microsecond -= 1
        if update:
            seed.instant = _shifted(seed.instant, nanos=-NANOS_PER_MICROSECOND)
        return seed
    seed.microsecond = SUBSECOND_RADIX - 1
    _carry(seed, millisecond_prev, update, nanos=-NANOS_PER_MICROSECOND)
    return seed


def nanosecond_next(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.nanosecond < SUBSECOND_RADIX - 1:
        seed.nanosecond += 1
        if update:
            seed.instant = _shifted(seed.instant, nanos=1)
        return seed
    seed.nanosecond = 0
    _carry(seed, microsecond_next, update, nanos=1)
    return seed


def nanosecond_prev(seed: CalendarSeed, update: bool = True) -> CalendarSeed:
    if seed.nanosecond > 0:
        seed.nanosecond -= 1
        if update:
            seed.instant = _shifted(seed.instant, nanos=-1)
        return seed
    seed.nanosecond = SUBSECOND_RADIX - 1
    _carry(seed, microsecond_prev, update, nanos=-1)
    return seed


# -- dispatch ---------------------------------------------------------------

STEPPERS: dict[TimeUnit, tuple[Stepper, Stepper]] = {
    TimeUnit.YEAR: (year_next, year_prev),
    TimeUnit.MONTH: (month_next, month_prev),
    TimeUnit.DAY: (day_next, day_prev),
    TimeUnit.HOUR: (hour_next, hour_prev),
    TimeUnit.MINUTE: (minute_next, minute_prev),
    TimeUnit.SECOND: (second_next, second_prev),
    TimeUnit.MILLISECOND: (millisecond_next, millisecond_prev),
    TimeUnit.MICROSECOND: (microsecond_next, microsecond_prev),
    TimeUnit.NANOSECOND: (nanosecond_next, nanosecond_prev),
}


def step_next(seed: CalendarSeed, unit: TimeUnit, update: bool = True) -> CalendarSeed:
    """Step ``seed`` one ``unit`` forward."""
    return STEPPERS[unit][0](seed, update)


def step_prev(seed: CalendarSeed, unit: TimeUnit, update: bool = True) -> CalendarSeed:
    """Step ``seed`` one ``unit`` backward."""
    return STEPPERS[unit][1](seed, update)


__all__ = [
    "STEPPERS",
    "step_next",
    "step_prev",
    "year_next",
    "year_prev",
    "month_next",
    "month_prev",
    "day_next",
    "day_prev",
    "hour_next",
    "hour_prev",
    "minute_next",
    "minute_prev",
    "second_next",
    "second_prev",
    "millisecond_next",
    "millisecond_prev",
    "microsecond_next",
    "microsecond_prev",
    "nanosecond_next",
    "nanosecond_prev",
]
