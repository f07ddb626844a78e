"""Internal constants for Almanac.

These constants define the unit sizes and fixed configuration used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Calendar structure
MONTHS_IN_YEAR: int = 12
DAYS_IN_YEAR: int = 365
DAYS_IN_LEAP_YEAR: int = 366
DAYS_IN_WEEK: int = 7
HOURS_IN_DAY: int = 24
MINUTES_IN_HOUR: int = 60
SECONDS_IN_MINUTE: int = 60

# Sub-second field radix (milliseconds, microseconds, nanoseconds)
SUBSECOND_RADIX: int = 1_000

# Coarse channel (milliseconds)
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

# Fine channel (nanoseconds below one millisecond)
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Anchor search stops once an anchor lies within this many years of the target
ANCHOR_YEAR_WINDOW: int = 5

# The one fixed local offset supported besides UTC
LOCAL_ZONE_NAME: str = "Asia/Jakarta"
LOCAL_UTC_OFFSET_MINUTES: int = 7 * MINUTES_IN_HOUR


__all__ = [
    "MONTHS_IN_YEAR",
    "DAYS_IN_YEAR",
    "DAYS_IN_LEAP_YEAR",
    "DAYS_IN_WEEK",
    "HOURS_IN_DAY",
    "MINUTES_IN_HOUR",
    "SECONDS_IN_MINUTE",
    "SUBSECOND_RADIX",
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "DAYS_IN_MONTH",
    "ANCHOR_YEAR_WINDOW",
    "LOCAL_ZONE_NAME",
    "LOCAL_UTC_OFFSET_MINUTES",
]
