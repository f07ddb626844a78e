"""Timezone tags.

Almanac knows exactly two zones: UTC and one fixed local offset
(Asia/Jakarta, UTC+07:00, no daylight saving). A calendar value carries
one of these tags; an Instant is always UTC-based.
"""

from __future__ import annotations

from enum import Enum

from almanac._internal.constants import (
    LOCAL_UTC_OFFSET_MINUTES,
    LOCAL_ZONE_NAME,
    MILLIS_PER_MINUTE,
)
from almanac.errors import ParseError


class TimeZone(Enum):
    """Supported timezone tags."""

    UTC = "UTC"
    LOCAL = LOCAL_ZONE_NAME


_ALIASES: dict[str, TimeZone] = {
    "utc": TimeZone.UTC,
    "zulu": TimeZone.UTC,
    "gmt": TimeZone.UTC,
    "gmt+0": TimeZone.UTC,
    "local": TimeZone.LOCAL,
    "gmt+7": TimeZone.LOCAL,
    "jakarta": TimeZone.LOCAL,
    LOCAL_ZONE_NAME.lower(): TimeZone.LOCAL,
}


def offset_millis(tz: TimeZone) -> int:
    """Return the offset of a zone from UTC in milliseconds.

    Examples:
        >>> offset_millis(TimeZone.UTC)
        0
        >>> offset_millis(TimeZone.LOCAL)
        25200000
    """
    if tz is TimeZone.LOCAL:
        return LOCAL_UTC_OFFSET_MINUTES * MILLIS_PER_MINUTE
    return 0


def to_string(tz: TimeZone) -> str:
    """Return the canonical name of a zone ("UTC" or "Asia/Jakarta")."""
    return tz.value


def to_offset_string(tz: TimeZone) -> str:
    """Return the zone as an ISO 8601 offset suffix ("Z" or "+07:00")."""
    if tz is TimeZone.UTC:
        return "Z"
    minutes = LOCAL_UTC_OFFSET_MINUTES
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def parse(s: str) -> TimeZone:
    """Parse a timezone tag from one of its accepted spellings.

    Raises:
        ParseError: If the name is not recognized.
    """
    try:
        return _ALIASES[s.strip().lower()]
    except (AttributeError, KeyError):
        raise ParseError(f"Invalid timezone: {s!r}") from None


__all__ = ["TimeZone", "offset_millis", "to_string", "to_offset_string", "parse"]
