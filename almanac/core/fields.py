"""Calendar fields without a weekday.

CalendarFields is the input side of ``calendar_to_instant``: a validated
set of proleptic Gregorian fields plus a timezone tag. The weekday is
always derived, never supplied.
"""

from __future__ import annotations

from dataclasses import dataclass

from almanac._internal.validation import validate_fields
from almanac.errors import ValidationError
from almanac.units.timezone import TimeZone


@dataclass(frozen=True)
class CalendarFields:
    """A validated calendar position.

    Examples:
        >>> CalendarFields(2019, 12, 31, 15, 20, 52, 658, 789, 337).day
        31

        >>> CalendarFields(2023, 2, 29)
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 28 for 2023-02, got 29
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    microsecond: int = 0
    nanosecond: int = 0
    timezone: TimeZone = TimeZone.UTC

    def __post_init__(self) -> None:
        validate_fields(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
            self.microsecond,
            self.nanosecond,
        )
        # Accept the tag's spelled-out form as well as the enum.
        if not isinstance(self.timezone, TimeZone):
            try:
                tz = TimeZone(self.timezone)
            except ValueError:
                raise ValidationError(
                    f"timezone must be one of {[t.value for t in TimeZone]}, "
                    f"got {self.timezone!r}"
                ) from None
            object.__setattr__(self, "timezone", tz)

    def as_tuple(self) -> tuple[int, int, int, int, int, int, int, int, int]:
        """Return the nine numeric fields, year first."""
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
            self.microsecond,
            self.nanosecond,
        )


__all__ = ["CalendarFields"]
