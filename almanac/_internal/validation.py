"""Validation utilities for Almanac.

This module provides range checks for calendar fields. Each check raises
ValidationError with a message naming the field, its bounds and the
offending value.

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import (
    HOURS_IN_DAY,
    MINUTES_IN_HOUR,
    MONTHS_IN_YEAR,
    SECONDS_IN_MINUTE,
    SUBSECOND_RADIX,
)
from almanac.errors import ValidationError


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that a named value lies within [min_val, max_val].

    Args:
        name: Field name used in the error message.
        value: The value to check.
        min_val: Inclusive lower bound.
        max_val: Inclusive upper bound.

    Raises:
        ValidationError: If value is not an int or is out of range.

    Examples:
        >>> validate_range("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    validate_range("month", month, 1, MONTHS_IN_YEAR)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from almanac._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if not isinstance(day, int) or day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_fields(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    microsecond: int,
    nanosecond: int,
) -> None:
    """Validate a complete set of calendar fields.

    The year is unbounded (proleptic), every other field must lie in its
    canonical range.

    Raises:
        ValidationError: On the first field found out of range.
    """
    if not isinstance(year, int) or isinstance(year, bool):
        raise ValidationError(f"year must be an integer, got {type(year).__name__}")
    validate_month(month)
    validate_day(year, month, day)
    validate_range("hour", hour, 0, HOURS_IN_DAY - 1)
    validate_range("minute", minute, 0, MINUTES_IN_HOUR - 1)
    validate_range("second", second, 0, SECONDS_IN_MINUTE - 1)
    validate_range("millisecond", millisecond, 0, SUBSECOND_RADIX - 1)
    validate_range("microsecond", microsecond, 0, SUBSECOND_RADIX - 1)
    validate_range("nanosecond", nanosecond, 0, SUBSECOND_RADIX - 1)


__all__ = [
    "validate_range",
    "validate_month",
    "validate_day",
    "validate_fields",
]
