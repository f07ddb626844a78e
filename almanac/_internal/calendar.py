"""Calendar rules for Almanac.

This module holds the three proleptic Gregorian rules everything else is
built on: the leap-year test, month lengths and year lengths. Walking
between calendar positions is done by the steppers in
``almanac.arithmetic``.

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import (
    DAYS_IN_LEAP_YEAR,
    DAYS_IN_MONTH,
    DAYS_IN_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2024, 4)
        30
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_YEAR


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
]
