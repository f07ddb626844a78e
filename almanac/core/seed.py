"""CalendarSeed: the mutable working register of the calendar engine.

A seed pairs calendar fields and a weekday with a live Instant. The
steppers, the convergence loop and the offset engine all operate on a
seed, and every one of them leaves the Instant and the fields describing
the same moment when it returns.

Seeds are created per call and never handed to callers; the public
result of any computation is a CalendarSnapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac.core.fields import CalendarFields
from almanac.core.instant import Instant
from almanac.errors import TypeMismatchError
from almanac.units.timezone import TimeZone
from almanac.units.weekday import Weekday

if TYPE_CHECKING:
    from almanac.convert.anchors import Anchor

_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
    "microsecond",
    "nanosecond",
)


class CalendarSeed:
    """Mutable calendar fields + weekday + Instant.

    Attributes:
        year, month, day, hour, minute, second, millisecond, microsecond,
        nanosecond: The calendar fields (UTC wall clock).
        weekday: Day of the week of the current date.
        instant: The point in time the fields describe.
    """

    __slots__ = _FIELDS + ("weekday", "instant")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        millisecond: int,
        microsecond: int,
        nanosecond: int,
        weekday: Weekday,
        instant: Instant,
    ) -> None:
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute
        self.second = second
        self.millisecond = millisecond
        self.microsecond = microsecond
        self.nanosecond = nanosecond
        self.weekday = Weekday(weekday)
        self.instant = instant

    @classmethod
    def from_anchor(cls, anchor: Anchor) -> CalendarSeed:
        """Start a seed at an anchor's calendar position and Instant."""
        return cls(*anchor.fields.as_tuple(), anchor.weekday, anchor.instant)

    def copy(self) -> CalendarSeed:
        """Return an independent seed; the Instant is copied too."""
        return CalendarSeed(*self.field_values(), self.weekday, self.instant.copy())

    def assign(self, other: CalendarSeed) -> CalendarSeed:
        """Overwrite every field of this seed with those of ``other``.

        Returns:
            This seed, for chaining.
        """
        if not isinstance(other, CalendarSeed):
            raise TypeMismatchError(
                f"cannot assign {type(other).__name__} to CalendarSeed"
            )
        for name in _FIELDS:
            setattr(self, name, getattr(other, name))
        self.weekday = other.weekday
        self.instant = other.instant.copy()
        return self

    def field_values(self) -> tuple[int, ...]:
        """Return the nine calendar fields, year first."""
        return tuple(getattr(self, name) for name in _FIELDS)

    def to_fields(self, timezone: TimeZone = TimeZone.UTC) -> CalendarFields:
        """Freeze the calendar fields, tagging them with ``timezone``."""
        return CalendarFields(*self.field_values(), timezone=timezone)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarSeed):
            return NotImplemented
        return (
            self.field_values() == other.field_values()
            and self.weekday == other.weekday
            and self.instant == other.instant
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        y, mo, d, h, mi, s, ms, us, ns = self.field_values()
        return (
            f"CalendarSeed({y:04d}-{mo:02d}-{d:02d}T{h:02d}:{mi:02d}:{s:02d}"
            f".{ms:03d}{us:03d}{ns:03d}, weekday={self.weekday.name}, "
            f"instant={self.instant!r})"
        )


__all__ = ["CalendarSeed"]
