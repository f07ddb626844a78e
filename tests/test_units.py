"""Tests for the unit enumerations and numeric coercion."""

from __future__ import annotations

import math

import pytest


class TestWeekday:
    """Tests for Weekday and its helper functions."""

    def test_codes(self) -> None:
        """Sunday is 0 and Saturday is 6."""
        from almanac.units.weekday import Weekday

        assert Weekday.SUNDAY == 0
        assert Weekday.SATURDAY == 6
        assert len(Weekday) == 7

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("wednesday", 3),
            ("Wed", 3),
            ("  SUNDAY ", 0),
            ("sat", 6),
        ],
    )
    def test_parse(self, text: str, expected: int) -> None:
        """Full and three-letter names parse, ignoring case and padding."""
        from almanac.units import weekday

        assert weekday.parse(text) == expected

    @pytest.mark.parametrize("text", ["funday", "", "we", None])
    def test_parse_invalid_raises(self, text: object) -> None:
        """Unknown names raise ParseError."""
        from almanac.errors import ParseError
        from almanac.units import weekday

        with pytest.raises(ParseError):
            weekday.parse(text)  # type: ignore[arg-type]

    def test_to_string(self) -> None:
        """to_string gives the lower-case English name."""
        from almanac.units import weekday

        assert weekday.to_string(weekday.Weekday.FRIDAY) == "friday"
        assert weekday.to_string(4) == "thursday"  # type: ignore[arg-type]

    def test_to_string_parse_agree(self) -> None:
        """Every weekday survives to_string then parse."""
        from almanac.units import weekday

        for day in weekday.Weekday:
            assert weekday.parse(weekday.to_string(day)) is day

    @pytest.mark.parametrize(
        "index,expected",
        [(0, 0), (6, 6), (7, 0), (-1, 6), ("10", 3), (2.0, 2), (" 8 ", 1)],
    )
    def test_index_of_wraps(self, index: object, expected: int) -> None:
        """index_of wraps any 0-based index, coercing loose input."""
        from almanac.units import weekday

        assert weekday.index_of(index) == expected

    @pytest.mark.parametrize("position,expected", [(1, 0), (7, 6), (0, 6), (8, 0)])
    def test_position_of_wraps(self, position: int, expected: int) -> None:
        """position_of is 1-based and wraps."""
        from almanac.units import weekday

        assert weekday.position_of(position) == expected

    @pytest.mark.parametrize("index", ["x", 2.5, None])
    def test_index_of_rejects_non_integers(self, index: object) -> None:
        """Values that do not coerce to a whole number raise ValueError."""
        from almanac.units import weekday

        with pytest.raises(ValueError):
            weekday.index_of(index)


class TestMonth:
    """Tests for Month and its helper functions."""

    def test_codes(self) -> None:
        """January is 1 and December is 12."""
        from almanac.units.month import Month

        assert Month.JANUARY == 1
        assert Month.DECEMBER == 12

    @pytest.mark.parametrize(
        "text,expected",
        [("feb", 2), ("September", 9), (" DEC ", 12), ("may", 5)],
    )
    def test_parse(self, text: str, expected: int) -> None:
        """Full and three-letter names parse."""
        from almanac.units import month

        assert month.parse(text) == expected

    def test_parse_invalid_raises(self) -> None:
        """Unknown names raise ParseError."""
        from almanac.errors import ParseError
        from almanac.units import month

        with pytest.raises(ParseError, match="Invalid month"):
            month.parse("smarch")

    def test_to_string(self) -> None:
        """to_string gives the lower-case English name."""
        from almanac.units import month

        assert month.to_string(month.Month.MARCH) == "march"

    @pytest.mark.parametrize("index,expected", [(0, 1), (11, 12), (12, 1), (-1, 12), ("1", 2)])
    def test_index_of_wraps(self, index: object, expected: int) -> None:
        """index_of is 0-based and wraps."""
        from almanac.units import month

        assert month.index_of(index) == expected

    @pytest.mark.parametrize("position,expected", [(1, 1), (12, 12), (13, 1), (0, 12)])
    def test_position_of_wraps(self, position: int, expected: int) -> None:
        """position_of is 1-based and wraps."""
        from almanac.units import month

        assert month.position_of(position) == expected


class TestTimeZone:
    """Tests for the timezone tags."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("UTC", "UTC"),
            ("zulu", "UTC"),
            ("GMT+0", "UTC"),
            ("local", "LOCAL"),
            ("Asia/Jakarta", "LOCAL"),
            (" gmt+7 ", "LOCAL"),
        ],
    )
    def test_parse(self, text: str, expected: str) -> None:
        """Accepted spellings map to the two tags."""
        from almanac.units import timezone

        assert timezone.parse(text).name == expected

    def test_parse_invalid_raises(self) -> None:
        """Unknown zones raise ParseError."""
        from almanac.errors import ParseError
        from almanac.units import timezone

        with pytest.raises(ParseError):
            timezone.parse("Mars/Olympus")

    def test_offsets(self) -> None:
        """UTC has no offset, LOCAL is seven hours ahead."""
        from almanac.units.timezone import TimeZone, offset_millis

        assert offset_millis(TimeZone.UTC) == 0
        assert offset_millis(TimeZone.LOCAL) == 7 * 3_600_000

    def test_strings(self) -> None:
        """Names and ISO offset suffixes."""
        from almanac.units.timezone import TimeZone, to_offset_string, to_string

        assert to_string(TimeZone.UTC) == "UTC"
        assert to_string(TimeZone.LOCAL) == "Asia/Jakarta"
        assert to_offset_string(TimeZone.UTC) == "Z"
        assert to_offset_string(TimeZone.LOCAL) == "+07:00"


class TestTimeUnit:
    """Tests for TimeUnit ordering and sizes."""

    def test_coarse_to_fine_order(self) -> None:
        """Units are listed from YEAR to NANOSECOND."""
        from almanac.units.timeunit import COARSE_TO_FINE, TimeUnit

        assert COARSE_TO_FINE[0] is TimeUnit.YEAR
        assert COARSE_TO_FINE[-1] is TimeUnit.NANOSECOND
        assert len(COARSE_TO_FINE) == 9

    def test_fixed_sizes(self) -> None:
        """Day and finer units have a fixed length in nanoseconds."""
        from almanac.units.timeunit import TimeUnit

        assert TimeUnit.YEAR.nanos is None
        assert TimeUnit.MONTH.nanos is None
        assert TimeUnit.DAY.nanos == 86_400_000_000_000
        assert TimeUnit.MILLISECOND.nanos == 1_000_000
        assert TimeUnit.NANOSECOND.nanos == 1

    def test_coarser(self) -> None:
        """coarser and coarser_units walk towards YEAR."""
        from almanac.units.timeunit import TimeUnit

        assert TimeUnit.YEAR.coarser is None
        assert TimeUnit.DAY.coarser is TimeUnit.MONTH
        assert TimeUnit.HOUR.coarser_units == (TimeUnit.YEAR, TimeUnit.MONTH, TimeUnit.DAY)

    def test_sub_millisecond(self) -> None:
        """Only microseconds and nanoseconds live on the fine channel."""
        from almanac.units.timeunit import COARSE_TO_FINE, TimeUnit

        fine = [u for u in COARSE_TO_FINE if u.is_sub_millisecond]
        assert fine == [TimeUnit.MICROSECOND, TimeUnit.NANOSECOND]


class TestToNumber:
    """Tests for the numeric coercion helper."""

    @pytest.mark.parametrize("value", [0, -7, 2.5, True])
    def test_numbers_pass_through(self, value: object) -> None:
        """int and float values are returned unchanged."""
        from almanac._internal.coerce import to_number

        assert to_number(value) is value

    @pytest.mark.parametrize(
        "value,expected",
        [(" 42 ", 42), ("-3", -3), ("2.5", 2.5), ("1e3", 1000.0), ("", 0), ("   ", 0)],
    )
    def test_strings_are_trimmed_and_parsed(self, value: str, expected: float) -> None:
        """Strings parse as int first, then float."""
        from almanac._internal.coerce import to_number

        result = to_number(value)
        assert result == expected
        assert type(result) is type(expected)

    @pytest.mark.parametrize("value", ["two", None, object(), [1]])
    def test_failure_is_nan(self, value: object) -> None:
        """Values that cannot be coerced become nan."""
        from almanac._internal.coerce import to_number

        assert math.isnan(to_number(value))

    def test_other_types_use_float(self) -> None:
        """Objects supporting float() are converted."""
        from decimal import Decimal

        from almanac._internal.coerce import to_number

        assert to_number(Decimal("1.25")) == 1.25
