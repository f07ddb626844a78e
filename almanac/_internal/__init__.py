"""Internal utilities for Almanac.

This module contains private implementation details:
    - Constants and unit sizes
    - Calendar rules (leap years, month lengths)
    - Field validation
    - Numeric coercion

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.calendar import days_in_month, days_in_year, is_leap_year
from almanac._internal.coerce import to_index, to_number
from almanac._internal.validation import (
    validate_day,
    validate_fields,
    validate_month,
    validate_range,
)

__all__: list[str] = [
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "to_index",
    "to_number",
    "validate_day",
    "validate_fields",
    "validate_month",
    "validate_range",
]
