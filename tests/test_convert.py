"""Tests for conversion between Instants and calendar values."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _millis(*args: int) -> int:
    return (datetime(*args, tzinfo=timezone.utc) - _EPOCH) // timedelta(milliseconds=1)


def _sample_instants(count: int = 60) -> list[tuple[int, int]]:
    """Deterministic instants between roughly 1810 and 2190."""
    rng = random.Random(20200101)
    return [
        (rng.randrange(-5_000_000_000_000, 7_000_000_000_000), rng.randrange(1_000_000))
        for _ in range(count)
    ]


class TestInstantToCalendar:
    """Tests for instant_to_calendar."""

    def test_anchor_instant(self) -> None:
        """1577836800000 is 2020-01-01T00:00:00Z, a Wednesday."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant
        from almanac.units.timezone import TimeZone
        from almanac.units.weekday import Weekday

        snap = instant_to_calendar(Instant(1577836800000, 0))
        assert snap.fields.as_tuple() == (2020, 1, 1, 0, 0, 0, 0, 0, 0)
        assert snap.weekday is Weekday.WEDNESDAY
        assert snap.timezone is TimeZone.UTC

    def test_epoch(self) -> None:
        """Instant 0 is 1970-01-01, a Thursday."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant
        from almanac.units.weekday import Weekday

        snap = instant_to_calendar(Instant(0))
        assert snap.fields.as_tuple() == (1970, 1, 1, 0, 0, 0, 0, 0, 0)
        assert snap.weekday is Weekday.THURSDAY

    def test_one_millisecond_before_epoch(self) -> None:
        """Instant -1 is the last millisecond of 1969."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant
        from almanac.units.weekday import Weekday

        snap = instant_to_calendar(Instant(-1))
        assert snap.fields.as_tuple() == (1969, 12, 31, 23, 59, 59, 999, 0, 0)
        assert snap.weekday is Weekday.WEDNESDAY

    def test_fine_channel_becomes_micro_and_nano(self) -> None:
        """The fine channel splits into microsecond and nanosecond."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant

        snap = instant_to_calendar(Instant(1577805652658, 789337))
        assert snap.fields.as_tuple() == (2019, 12, 31, 15, 20, 52, 658, 789, 337)

    @pytest.mark.parametrize(
        "fine,expected_instant,expected_tail",
        [
            (1_500_000, (1, 500_000), (0, 0, 1, 500, 0)),
            (-1, (-1, 999_999), (59, 59, 999, 999, 999)),
        ],
    )
    def test_out_of_window_fine_is_carried(self, fine, expected_instant, expected_tail) -> None:
        """A non-canonical fine channel is folded into milliseconds first."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant

        snap = instant_to_calendar(Instant(0, fine))
        assert snap.instant == Instant(*expected_instant)
        assert snap.fields.as_tuple()[4:] == expected_tail

    @pytest.mark.parametrize("coarse,fine", _sample_instants())
    def test_matches_stdlib(self, coarse: int, fine: int) -> None:
        """Fields and weekday agree with the standard library."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant

        expected = _EPOCH + timedelta(milliseconds=coarse)
        snap = instant_to_calendar(Instant(coarse, fine))
        assert snap.fields.as_tuple() == (
            expected.year,
            expected.month,
            expected.day,
            expected.hour,
            expected.minute,
            expected.second,
            expected.microsecond // 1000,
            fine // 1000,
            fine % 1000,
        )
        assert snap.weekday == (expected.weekday() + 1) % 7

    def test_type_mismatch(self) -> None:
        """Only Instants convert."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.errors import TypeMismatchError

        with pytest.raises(TypeMismatchError):
            instant_to_calendar(1577836800000)  # type: ignore[arg-type]


class TestCalendarToInstant:
    """Tests for calendar_to_instant."""

    def test_before_anchor(self) -> None:
        """2019-12-31T15:20:52.658789337Z gives 1577805652658 + 789337 ns."""
        from almanac.convert.instant import calendar_to_instant
        from almanac.core.fields import CalendarFields
        from almanac.core.instant import Instant

        fields = CalendarFields(2019, 12, 31, 15, 20, 52, 658, 789, 337)
        assert calendar_to_instant(fields) == Instant(1577805652658, 789337)

    @pytest.mark.parametrize(
        "fields,coarse",
        [
            ((1900, 1, 1), -2208988800000),
            ((2038, 1, 19, 3, 14, 7), 2147483647000),
            ((1970, 1, 1), 0),
            ((2000, 2, 29, 12), 951825600000),
        ],
    )
    def test_known_instants(self, fields: tuple[int, ...], coarse: int) -> None:
        """Well-known timestamps."""
        from almanac.convert.instant import calendar_to_instant
        from almanac.core.fields import CalendarFields

        assert calendar_to_instant(CalendarFields(*fields)).coarse == coarse

    def test_far_dates_match_stdlib(self) -> None:
        """Dates far outside the anchor table still convert exactly."""
        from almanac.convert.instant import calendar_to_instant
        from almanac.core.fields import CalendarFields

        for when in [(1, 1, 1), (1582, 10, 15), (1776, 7, 4, 12), (2999, 12, 31, 23, 59, 59)]:
            assert calendar_to_instant(CalendarFields(*when)).coarse == _millis(*when)


class TestRoundTrip:
    """Conversions in both directions agree."""

    @pytest.mark.parametrize("coarse,fine", _sample_instants(30))
    def test_instant_round_trip(self, coarse: int, fine: int) -> None:
        """calendar_to_instant(instant_to_calendar(i)) == i."""
        from almanac.convert.instant import calendar_to_instant, instant_to_calendar
        from almanac.core.instant import Instant

        instant = Instant(coarse, fine)
        assert calendar_to_instant(instant_to_calendar(instant).fields) == instant

    @pytest.mark.parametrize(
        "fields",
        [
            (2019, 12, 31, 15, 20, 52, 658, 789, 337),
            (2024, 2, 29, 23, 59, 59, 999, 999, 999),
            (1955, 6, 15, 6, 7, 8, 9, 10, 11),
            (1900, 3, 1, 0, 0, 0, 0, 0, 1),
            (2100, 12, 31, 12, 0, 0, 0, 0, 0),
        ],
    )
    def test_calendar_round_trip(self, fields: tuple[int, ...]) -> None:
        """instant_to_calendar(calendar_to_instant(c)) reproduces c."""
        from almanac.convert.instant import calendar_to_instant, instant_to_calendar
        from almanac.core.fields import CalendarFields

        original = CalendarFields(*fields)
        assert instant_to_calendar(calendar_to_instant(original)).fields == original


class TestLocalZone:
    """Tests for the fixed local offset."""

    def test_epoch_in_local(self) -> None:
        """The epoch is 07:00 on the local wall clock."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant
        from almanac.units.timezone import TimeZone

        snap = instant_to_calendar(Instant(0), TimeZone.LOCAL)
        assert snap.fields.as_tuple() == (1970, 1, 1, 7, 0, 0, 0, 0, 0)
        assert snap.timezone is TimeZone.LOCAL
        assert snap.instant == Instant(0)

    def test_local_date_crosses_midnight(self) -> None:
        """20:00Z on New Year's Eve is already New Year's Day locally."""
        from almanac.convert.instant import instant_to_calendar
        from almanac.core.instant import Instant
        from almanac.units.timezone import TimeZone
        from almanac.units.weekday import Weekday

        snap = instant_to_calendar(Instant(_millis(2019, 12, 31, 20)), TimeZone.LOCAL)
        assert (snap.year, snap.month, snap.day, snap.hour) == (2020, 1, 1, 3)
        assert snap.weekday is Weekday.WEDNESDAY

    def test_local_fields_remove_offset(self) -> None:
        """Local wall-clock fields convert to the UTC-based Instant."""
        from almanac.convert.instant import calendar_to_instant
        from almanac.core.fields import CalendarFields
        from almanac.core.instant import Instant
        from almanac.units.timezone import TimeZone

        fields = CalendarFields(1970, 1, 1, 7, timezone=TimeZone.LOCAL)
        assert calendar_to_instant(fields) == Instant(0)

    def test_local_round_trip(self) -> None:
        """Local fields survive a round trip through the Instant."""
        from almanac.convert.instant import calendar_to_instant, instant_to_calendar
        from almanac.core.fields import CalendarFields
        from almanac.units.timezone import TimeZone

        fields = CalendarFields(2020, 1, 1, 3, 15, timezone=TimeZone.LOCAL)
        back = instant_to_calendar(calendar_to_instant(fields), TimeZone.LOCAL)
        assert back.fields == fields


class TestWeekdayOf:
    """Tests for weekday_of."""

    @pytest.mark.parametrize(
        "when,expected",
        [
            ((2000, 1, 1), "SATURDAY"),
            ((1900, 1, 1), "MONDAY"),
            ((2038, 1, 19), "TUESDAY"),
            ((1969, 7, 20), "SUNDAY"),
            ((2024, 2, 29), "THURSDAY"),
            ((2019, 12, 31), "TUESDAY"),
        ],
    )
    def test_known_dates(self, when: tuple[int, int, int], expected: str) -> None:
        """Weekdays of well-known dates."""
        from almanac.convert.instant import weekday_of
        from almanac.core.fields import CalendarFields

        assert weekday_of(CalendarFields(*when)).name == expected
