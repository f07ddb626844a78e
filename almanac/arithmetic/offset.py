"""Offset engine: add a signed number of units to a CalendarSeed.

Adding ``n`` of a unit gives the same result as calling that unit's
stepper ``n`` times, but large offsets are first consumed in whole steps
of the coarser units (years, then months, then days, ...). Only what is
left, less than one step of the next coarser unit, is stepped unit by
unit. Every step goes through the steppers, so the seed's weekday and
Instant stay in line with its fields throughout.
"""

from __future__ import annotations

import logging

from almanac._internal.constants import MONTHS_IN_YEAR, NANOS_PER_MILLISECOND
from almanac.arithmetic.stepper import step_next, step_prev
from almanac.core.instant import Instant
from almanac.core.seed import CalendarSeed
from almanac.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)

# Twelve month steps equal one year step only when no month clamps the day.
_UNCLAMPED_DAY = 28


def _elapsed(before: Instant, after: Instant) -> int:
    """Return the signed nanoseconds from ``before`` to ``after``."""
    return (after.coarse - before.coarse) * NANOS_PER_MILLISECOND + (after.fine - before.fine)


def _consume(seed: CalendarSeed, unit: TimeUnit, remaining: int) -> int:
    """Take whole ``unit`` steps while each one fits in ``remaining`` nanoseconds.

    Returns:
        The nanoseconds still to be covered.
    """
    step = step_next if remaining > 0 else step_prev
    taken = 0
    while remaining:
        candidate = step(seed.copy(), unit)
        moved = _elapsed(seed.instant, candidate.instant)
        if abs(moved) > abs(remaining):
            break
        seed.assign(candidate)
        remaining -= moved
        taken += 1
    if taken:
        logger.debug("consumed %d %s step(s)", taken, unit.value)
    return remaining


def _add_months(seed: CalendarSeed, delta: int) -> CalendarSeed:
    forward = delta > 0
    remaining = abs(delta)
    while remaining:
        if remaining >= MONTHS_IN_YEAR and seed.day <= _UNCLAMPED_DAY:
            (step_next if forward else step_prev)(seed, TimeUnit.YEAR)
            remaining -= MONTHS_IN_YEAR
        else:
            (step_next if forward else step_prev)(seed, TimeUnit.MONTH)
            remaining -= 1
    return seed


def add_unit(seed: CalendarSeed, unit: TimeUnit, delta: int) -> CalendarSeed:
    """Move ``seed`` by ``delta`` (signed) steps of ``unit``.

    Args:
        seed: The seed to move, modified in place.
        unit: The unit ``delta`` is counted in.
        delta: Number of units; negative moves backward.

    Returns:
        The same seed.

    Examples:
        >>> from almanac.convert.anchors import ANCHORS
        >>> seed = CalendarSeed.from_anchor(ANCHORS[0])   # 2020-01-01
        >>> add_unit(seed, TimeUnit.MINUTE, 60 * 24 * 366).year
        2021
    """
    if delta == 0:
        return seed

    if unit is TimeUnit.YEAR:
        step = step_next if delta > 0 else step_prev
        for _ in range(abs(delta)):
            step(seed, unit)
        return seed

    if unit is TimeUnit.MONTH:
        return _add_months(seed, delta)

    size = unit.nanos
    remaining = delta * size
    for coarser in unit.coarser_units:
        remaining = _consume(seed, coarser, remaining)

    step = step_next if remaining > 0 else step_prev
    for _ in range(abs(remaining) // size):
        step(seed, unit)
    return seed


__all__ = ["add_unit"]
