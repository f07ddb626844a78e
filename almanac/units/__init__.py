"""Calendar units and enumerations.

This module provides:
    - Weekday: day-of-week codes (0=Sunday) with parse/to_string helpers
    - Month: month codes (1=January) with parse/to_string helpers
    - TimeZone: the two supported zone tags (UTC, LOCAL)
    - TimeUnit: the nine calendar units, coarse to fine
"""

from __future__ import annotations

from almanac.units.month import Month
from almanac.units.timeunit import COARSE_TO_FINE, TimeUnit
from almanac.units.timezone import TimeZone
from almanac.units.weekday import Weekday

__all__: list[str] = [
    "COARSE_TO_FINE",
    "Month",
    "TimeUnit",
    "TimeZone",
    "Weekday",
]
