"""Loose numeric coercion.

This module is not part of the public API.
"""

from __future__ import annotations

import math
from typing import Any


def to_number(value: Any) -> int | float:
    """Coerce an arbitrary value to a number.

    Rules:
        - ``int`` and ``float`` pass through unchanged (``bool`` counts as int).
        - ``str`` is trimmed, then parsed as an int, falling back to float.
          An empty string is ``0``.
        - Anything else goes through ``float()``.

    Failure never raises; the result is ``nan`` instead.

    Args:
        value: The value to coerce.

    Returns:
        The numeric value, or ``math.nan`` when coercion fails.

    Examples:
        >>> to_number(" 42 ")
        42
        >>> to_number("2.5")
        2.5
        >>> to_number("two")
        nan
    """
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def to_index(value: Any) -> int:
    """Coerce a value to an integer index.

    Raises:
        ValueError: If the value does not coerce to a whole number.
    """
    number = to_number(value)
    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number) or not number.is_integer():
            raise ValueError(f"not an integer index: {value!r}")
        return int(number)
    return int(number)


__all__ = ["to_number", "to_index"]
