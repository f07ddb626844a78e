"""Calendar arithmetic on CalendarSeed.

This module provides the three engines that move a seed through the
calendar while keeping its weekday and Instant in line with its fields:

Stepping (from almanac.arithmetic.stepper):
    - step_next, step_prev: move one unit forward or backward
    - <unit>_next, <unit>_prev: the per-unit steppers behind them

Convergence (from almanac.arithmetic.converge):
    - unit_near: approach a target Instant by one unit without overshooting
    - converge: resolve all nine units, coarse to fine

Offsets (from almanac.arithmetic.offset):
    - add_unit: add a signed count of one unit, batching coarser units
"""

from __future__ import annotations

from almanac.arithmetic.converge import converge, unit_near
from almanac.arithmetic.offset import add_unit
from almanac.arithmetic.stepper import STEPPERS, step_next, step_prev

__all__ = [
    # Stepping
    "STEPPERS",
    "step_next",
    "step_prev",
    # Convergence
    "unit_near",
    "converge",
    # Offsets
    "add_unit",
]
