"""CalendarSnapshot: the immutable public calendar value.

A snapshot is a calendar position (fields + timezone tag) together with
its weekday and its Instant. Both derived values are computed once, when
the snapshot is built, and never change afterwards.
"""

from __future__ import annotations

from almanac._internal.coerce import to_index
from almanac._internal.constants import NANOS_PER_MILLISECOND
from almanac.core.fields import CalendarFields
from almanac.core.instant import Instant
from almanac.core.seed import CalendarSeed
from almanac.core.span import Span
from almanac.errors import TypeMismatchError
from almanac.units.timeunit import TimeUnit
from almanac.units.timezone import TimeZone, offset_millis, to_offset_string
from almanac.units.weekday import Weekday

# Order in which a Span's components are applied, coarse to fine.
_SPAN_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
    TimeUnit.MICROSECOND,
    TimeUnit.NANOSECOND,
)


class CalendarSnapshot:
    """An immutable calendar date and time with weekday and Instant.

    Attributes:
        year, month, day, hour, minute, second, millisecond, microsecond,
        nanosecond: The wall-clock fields in ``timezone``.
        weekday: Day of the week (derived).
        timezone: UTC or LOCAL.
        instant: The point in time (UTC-based, derived).

    Examples:
        >>> snap = CalendarSnapshot(2020, 1, 1)
        >>> snap.weekday.name
        'WEDNESDAY'
        >>> snap.instant
        Instant(coarse=1577836800000, fine=0)

        >>> str(snap.shifted(TimeUnit.MONTH, 1))
        '2020-02-01T00:00:00.000000000Z'
    """

    __slots__ = ("_fields", "_weekday", "_instant")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
        timezone: TimeZone = TimeZone.UTC,
    ) -> None:
        """Create a snapshot from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        fields = CalendarFields(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond,
            microsecond,
            nanosecond,
            timezone=timezone,
        )
        self._init_from_fields(fields)

    def _init_from_fields(self, fields: CalendarFields) -> None:
        from almanac.convert.instant import calendar_to_instant, weekday_of

        self._fields: CalendarFields = fields
        self._weekday: Weekday = weekday_of(fields)
        self._instant: Instant = calendar_to_instant(fields)

    @classmethod
    def _from_internal(
        cls,
        fields: CalendarFields,
        weekday: Weekday,
        instant: Instant,
    ) -> CalendarSnapshot:
        """Create a snapshot from already-derived parts, bypassing derivation."""
        instance = object.__new__(cls)
        instance._fields = fields
        instance._weekday = weekday
        instance._instant = instant.copy()
        return instance

    @classmethod
    def of(cls, *args: int, **kwargs: object) -> CalendarSnapshot:
        """Alias for the constructor."""
        return cls(*args, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_fields(cls, fields: CalendarFields) -> CalendarSnapshot:
        """Create a snapshot from validated CalendarFields."""
        instance = object.__new__(cls)
        instance._init_from_fields(fields)
        return instance

    @classmethod
    def from_instant(
        cls,
        instant: Instant,
        timezone: TimeZone = TimeZone.UTC,
    ) -> CalendarSnapshot:
        """Create a snapshot showing ``instant`` on the wall clock of ``timezone``.

        Examples:
            >>> CalendarSnapshot.from_instant(Instant(0)).year
            1970
        """
        from almanac.convert.instant import instant_to_calendar

        return instant_to_calendar(instant, timezone)

    @classmethod
    def now(cls, timezone: TimeZone = TimeZone.UTC) -> CalendarSnapshot:
        """Return the current date and time in ``timezone``."""
        return cls.from_instant(Instant.now(), timezone)

    # -- fields ---------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._fields.year

    @property
    def month(self) -> int:
        return self._fields.month

    @property
    def day(self) -> int:
        return self._fields.day

    @property
    def hour(self) -> int:
        return self._fields.hour

    @property
    def minute(self) -> int:
        return self._fields.minute

    @property
    def second(self) -> int:
        return self._fields.second

    @property
    def millisecond(self) -> int:
        return self._fields.millisecond

    @property
    def microsecond(self) -> int:
        return self._fields.microsecond

    @property
    def nanosecond(self) -> int:
        return self._fields.nanosecond

    @property
    def weekday(self) -> Weekday:
        return self._weekday

    @property
    def timezone(self) -> TimeZone:
        return self._fields.timezone

    @property
    def fields(self) -> CalendarFields:
        """Return the calendar fields (frozen, safe to share)."""
        return self._fields

    @property
    def instant(self) -> Instant:
        """Return a copy of this snapshot's Instant."""
        return self._instant.copy()

    # -- arithmetic -----------------------------------------------------------

    def _seed(self) -> CalendarSeed:
        """Build a seed on this wall clock; its Instant includes the zone offset."""
        wall = Instant(
            self._instant.coarse + offset_millis(self.timezone),
            self._instant.fine,
        )
        return CalendarSeed(*self._fields.as_tuple(), self._weekday, wall)

    def _from_seed(self, seed: CalendarSeed) -> CalendarSnapshot:
        instant = Instant(
            seed.instant.coarse - offset_millis(self.timezone),
            seed.instant.fine,
        )
        return CalendarSnapshot._from_internal(
            seed.to_fields(self.timezone), seed.weekday, instant
        )

    def shifted(self, unit: TimeUnit, amount: int) -> CalendarSnapshot:
        """Return a snapshot ``amount`` units away (negative moves back).

        Month and year shifts clamp the day to the length of the month
        they land in.

        Raises:
            ValueError: If amount is not a whole number.

        Examples:
            >>> str(CalendarSnapshot(2024, 1, 31).shifted(TimeUnit.MONTH, 1))
            '2024-02-29T00:00:00.000000000Z'
        """
        from almanac.arithmetic.offset import add_unit

        seed = self._seed()
        add_unit(seed, TimeUnit(unit), to_index(amount))
        return self._from_seed(seed)

    def plus(self, span: Span) -> CalendarSnapshot:
        """Return this snapshot moved forward by ``span``.

        The span's components are applied one at a time, days first.

        Raises:
            TypeMismatchError: If span is not a Span.
        """
        from almanac.arithmetic.offset import add_unit

        if not isinstance(span, Span):
            raise TypeMismatchError(
                f"cannot add {type(span).__name__} to CalendarSnapshot"
            )
        seed = self._seed()
        for unit, amount in zip(_SPAN_UNITS, span.components()):
            add_unit(seed, unit, amount)
        return self._from_seed(seed)

    def minus(self, span: Span) -> CalendarSnapshot:
        """Return this snapshot moved backward by ``span``."""
        if not isinstance(span, Span):
            raise TypeMismatchError(
                f"cannot subtract {type(span).__name__} from CalendarSnapshot"
            )
        return self.plus(-span)

    def span_until(self, other: CalendarSnapshot) -> Span:
        """Return the Span from this snapshot to ``other``.

        Examples:
            >>> a = CalendarSnapshot(2024, 1, 1)
            >>> a.span_until(CalendarSnapshot(2024, 1, 2, 1)).hours
            1
        """
        if not isinstance(other, CalendarSnapshot):
            raise TypeMismatchError(
                f"cannot measure from CalendarSnapshot to {type(other).__name__}"
            )
        return Span.from_nanoseconds(other._total_nanos() - self._total_nanos())

    def _total_nanos(self) -> int:
        return self._instant.coarse * NANOS_PER_MILLISECOND + self._instant.fine

    def is_before(self, other: CalendarSnapshot) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: CalendarSnapshot) -> bool:
        return self.compare_to(other) > 0

    # -- zones ----------------------------------------------------------------

    def to_utc(self) -> CalendarSnapshot:
        """Return the same instant on the UTC wall clock."""
        if self.timezone is TimeZone.UTC:
            return self
        return CalendarSnapshot.from_instant(self._instant, TimeZone.UTC)

    def to_local(self) -> CalendarSnapshot:
        """Return the same instant on the LOCAL (UTC+07:00) wall clock."""
        if self.timezone is TimeZone.LOCAL:
            return self
        return CalendarSnapshot.from_instant(self._instant, TimeZone.LOCAL)

    # -- comparison -----------------------------------------------------------

    def compare_to(self, other: CalendarSnapshot) -> int:
        """Compare by Instant.

        Returns:
            -1, 0 or 1.

        Raises:
            TypeMismatchError: If other is not a CalendarSnapshot.
        """
        if not isinstance(other, CalendarSnapshot):
            raise TypeMismatchError(
                f"cannot compare CalendarSnapshot with {type(other).__name__}"
            )
        return self._instant.compare_to(other._instant)

    def equals(self, other: CalendarSnapshot) -> bool:
        """Return True if both snapshots denote the same Instant.

        Raises:
            TypeMismatchError: If other is not a CalendarSnapshot.
        """
        return self.compare_to(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarSnapshot):
            return NotImplemented
        return self._instant == other._instant

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarSnapshot):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarSnapshot):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarSnapshot):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarSnapshot):
            return NotImplemented
        return self._instant >= other._instant

    def __hash__(self) -> int:
        return hash((self._instant.coarse, self._instant.fine))

    # -- display --------------------------------------------------------------

    def __str__(self) -> str:
        """Return an ISO 8601 string with nine fractional digits.

        Examples:
            >>> str(CalendarSnapshot(2020, 1, 1, timezone=TimeZone.LOCAL))
            '2020-01-01T00:00:00.000000000+07:00'
        """
        y, mo, d, h, mi, s, ms, us, ns = self._fields.as_tuple()
        return (
            f"{y:04d}-{mo:02d}-{d:02d}T{h:02d}:{mi:02d}:{s:02d}"
            f".{ms:03d}{us:03d}{ns:03d}{to_offset_string(self.timezone)}"
        )

    def __repr__(self) -> str:
        y, mo, d, h, mi, s, ms, us, ns = self._fields.as_tuple()
        return (
            f"CalendarSnapshot({y}, {mo}, {d}, {h}, {mi}, {s}, "
            f"millisecond={ms}, microsecond={us}, nanosecond={ns}, "
            f"timezone={self.timezone.name})"
        )


__all__ = ["CalendarSnapshot"]
