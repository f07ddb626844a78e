"""Span class representing a carry-normalized calendar duration.

This module provides the Span class: a signed duration broken into days,
hours, minutes, seconds, milliseconds, microseconds and nanoseconds.
"""

from __future__ import annotations

from almanac._internal.constants import (
    HOURS_IN_DAY,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MINUTES_IN_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_IN_MINUTE,
    SUBSECOND_RADIX,
)
from almanac.errors import TypeMismatchError

# (field, radix, field receiving the carry), finest first
_CARRY_ORDER: tuple[tuple[str, int, str], ...] = (
    ("_nanoseconds", SUBSECOND_RADIX, "_microseconds"),
    ("_microseconds", SUBSECOND_RADIX, "_milliseconds"),
    ("_milliseconds", SUBSECOND_RADIX, "_seconds"),
    ("_seconds", SECONDS_IN_MINUTE, "_minutes"),
    ("_minutes", MINUTES_IN_HOUR, "_hours"),
    ("_hours", HOURS_IN_DAY, "_days"),
)

_FIELDS: tuple[str, ...] = (
    "_days",
    "_hours",
    "_minutes",
    "_seconds",
    "_milliseconds",
    "_microseconds",
    "_nanoseconds",
)


class Span:
    """A duration measured in days and finer units.

    Span is not anchored to a calendar position, so days are never folded
    into months or years. Every other field is normalized into its
    canonical range:

    - 0 <= hours < 24
    - 0 <= minutes < 60
    - 0 <= seconds < 60
    - 0 <= milliseconds, microseconds, nanoseconds < 1000

    Negative spans borrow from the day field, which carries the sign.

    Examples:
        >>> Span(hours=25)
        Span(days=1, hours=1, minutes=0, seconds=0, milliseconds=0, microseconds=0, nanoseconds=0)

        >>> Span(minutes=-30).days
        -1
        >>> Span(minutes=-30).minutes
        30

        >>> (Span(seconds=45) + Span(seconds=30)).minutes
        1
    """

    __slots__ = _FIELDS

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Span from component parts.

        All parameters can be positive, negative, or zero. The resulting
        span is normalized to canonical form.
        """
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._milliseconds = milliseconds
        self._microseconds = microseconds
        self._nanoseconds = nanoseconds
        self._normalize()

    def _normalize(self) -> None:
        """Carry each field into the next coarser one, nanoseconds first."""
        for name, radix, coarser in _CARRY_ORDER:
            carry, value = divmod(getattr(self, name), radix)
            setattr(self, name, value)
            setattr(self, coarser, getattr(self, coarser) + carry)

    @classmethod
    def zero(cls) -> Span:
        """Return a zero-length span."""
        return cls()

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Span:
        """Create a Span from a signed number of nanoseconds.

        Examples:
            >>> Span.from_nanoseconds(1_500).microseconds
            1
        """
        return cls(nanoseconds=nanoseconds)

    @property
    def days(self) -> int:
        """Return the days component (carries the sign)."""
        return self._days

    @property
    def hours(self) -> int:
        """Return the hours component [0, 24)."""
        return self._hours

    @property
    def minutes(self) -> int:
        """Return the minutes component [0, 60)."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Return the seconds component [0, 60)."""
        return self._seconds

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds component [0, 1000)."""
        return self._milliseconds

    @property
    def microseconds(self) -> int:
        """Return the microseconds component [0, 1000)."""
        return self._microseconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds component [0, 1000)."""
        return self._nanoseconds

    @property
    def total_milliseconds(self) -> int:
        """Return the whole-millisecond part of the span.

        Together with ``sub_millisecond_nanos`` this is what gets added to
        the two channels of an Instant.
        """
        return (
            self._days * MILLIS_PER_DAY
            + self._hours * MILLIS_PER_HOUR
            + self._minutes * MILLIS_PER_MINUTE
            + self._seconds * MILLIS_PER_SECOND
            + self._milliseconds
        )

    @property
    def sub_millisecond_nanos(self) -> int:
        """Return microseconds and nanoseconds as nanoseconds [0, 1_000_000)."""
        return self._microseconds * NANOS_PER_MICROSECOND + self._nanoseconds

    @property
    def total_nanoseconds(self) -> int:
        """Return the total span in nanoseconds (exact).

        Examples:
            >>> Span(seconds=1, nanoseconds=500).total_nanoseconds
            1000000500
        """
        return self.total_milliseconds * NANOS_PER_MILLISECOND + self.sub_millisecond_nanos

    @property
    def is_negative(self) -> bool:
        """Return True if the span points backwards in time."""
        return self._days < 0

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return all(getattr(self, name) == 0 for name in _FIELDS)

    def components(self) -> tuple[int, int, int, int, int, int, int]:
        """Return (days, hours, minutes, seconds, ms, us, ns)."""
        return tuple(getattr(self, name) for name in _FIELDS)  # type: ignore[return-value]

    def compare_to(self, other: Span) -> int:
        """Compare field by field, days first.

        Returns:
            -1, 0 or 1.

        Raises:
            TypeMismatchError: If other is not a Span.
        """
        if not isinstance(other, Span):
            raise TypeMismatchError(f"cannot compare Span with {type(other).__name__}")
        mine, theirs = self.components(), other.components()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def equals(self, other: Span) -> bool:
        """Return True if every component matches.

        Raises:
            TypeMismatchError: If other is not a Span.
        """
        if not isinstance(other, Span):
            raise TypeMismatchError(f"cannot equate Span with {type(other).__name__}")
        return self.components() == other.components()

    def __add__(self, other: object) -> Span:
        """Add two spans field by field, then renormalize.

        Examples:
            >>> (Span(hours=23) + Span(hours=2)).days
            1
        """
        if not isinstance(other, Span):
            return NotImplemented
        return Span(*(a + b for a, b in zip(self.components(), other.components())))

    def __radd__(self, other: object) -> Span:
        """Support sum() by handling 0 + Span."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Span:
        """Subtract two spans field by field, then renormalize."""
        if not isinstance(other, Span):
            return NotImplemented
        return Span(*(a - b for a, b in zip(self.components(), other.components())))

    def __neg__(self) -> Span:
        return Span(*(-value for value in self.components()))

    def __abs__(self) -> Span:
        return -self if self.is_negative else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.components() == other.components()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.components() < other.components()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.components() <= other.components()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.components() > other.components()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.components() >= other.components()

    def __hash__(self) -> int:
        return hash(self.components())

    def __bool__(self) -> bool:
        return not self.is_zero

    def __repr__(self) -> str:
        return (
            f"Span(days={self._days}, hours={self._hours}, minutes={self._minutes}, "
            f"seconds={self._seconds}, milliseconds={self._milliseconds}, "
            f"microseconds={self._microseconds}, nanoseconds={self._nanoseconds})"
        )

    def __str__(self) -> str:
        """Return a string like "1 day, 2:30:45.000000001"."""
        clock = f"{self._hours}:{self._minutes:02d}:{self._seconds:02d}"
        fraction = self.sub_millisecond_nanos + self._milliseconds * NANOS_PER_MILLISECOND
        if fraction:
            clock += f".{fraction:09d}"
        if self._days == 0:
            return clock
        unit = "day" if abs(self._days) == 1 else "days"
        return f"{self._days} {unit}, {clock}"


__all__ = ["Span"]
