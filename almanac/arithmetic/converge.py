"""Convergence: drive a CalendarSeed onto a target Instant.

The distance between an anchor and an arbitrary Instant is decomposed
into years, months, days and so on down to nanoseconds. Unit lengths
depend on where in the calendar the seed is, so the decomposition is
done by stepping rather than by division: for each unit, coarse to fine,
the seed is stepped towards the target for as long as a step does not
carry it past the target.

Each unit assumes every coarser unit has already been resolved. The
units must therefore be run in COARSE_TO_FINE order; ``converge`` does
exactly that.
"""

from __future__ import annotations

import logging
from typing import Callable

from almanac.arithmetic.stepper import step_next, step_prev
from almanac.core.instant import Instant
from almanac.core.seed import CalendarSeed
from almanac.units.timeunit import COARSE_TO_FINE, TimeUnit

logger = logging.getLogger(__name__)


def _millis_channel(instant: Instant) -> tuple[int, ...]:
    return (instant.coarse,)


def _full_channel(instant: Instant) -> tuple[int, ...]:
    return (instant.coarse, instant.fine)


def _channel(unit: TimeUnit) -> Callable[[Instant], tuple[int, ...]]:
    """Year through millisecond compare milliseconds; finer units add nanoseconds."""
    return _full_channel if unit.is_sub_millisecond else _millis_channel


def unit_near(seed: CalendarSeed, unit: TimeUnit, target: Instant) -> CalendarSeed:
    """Step ``seed`` by ``unit`` towards ``target`` without overshooting.

    While the seed is behind the target, a copy is stepped forward and
    kept only if it is still at or before the target. While the seed is
    ahead, a copy is stepped backward and kept only if it is still at or
    after the target.

    Args:
        seed: The seed to move, modified in place.
        unit: The unit to step by.
        target: The Instant to approach.

    Returns:
        The same seed.
    """
    key = _channel(unit)
    goal = key(target)

    while key(seed.instant) < goal:
        candidate = step_next(seed.copy(), unit)
        if key(candidate.instant) > goal:
            break
        seed.assign(candidate)

    while key(seed.instant) > goal:
        candidate = step_prev(seed.copy(), unit)
        if key(candidate.instant) < goal:
            break
        seed.assign(candidate)

    return seed


def converge(seed: CalendarSeed, target: Instant) -> CalendarSeed:
    """Run ``unit_near`` for all nine units, coarse to fine.

    On return the seed's Instant equals ``target`` and its fields describe
    it, provided ``target.fine`` lies in ``[0, 1_000_000)``.
    """
    logger.debug("converging %r onto %r", seed, target)
    for unit in COARSE_TO_FINE:
        unit_near(seed, unit, target)
    logger.debug("converged to %r", seed)
    return seed


__all__ = ["unit_near", "converge"]
