"""Tests for Span class.

These tests verify the Span implementation, including construction,
carry normalization, arithmetic, and comparison operations.
"""

from __future__ import annotations

import pytest


class TestSpanNormalization:
    """Tests for the carry pass."""

    def test_default_is_zero(self) -> None:
        """Span() is the zero span."""
        from almanac.core.span import Span

        s = Span()
        assert s.is_zero
        assert not s
        assert s == Span.zero()

    def test_hours_carry_into_days(self) -> None:
        """25 hours normalize to 1 day and 1 hour."""
        from almanac.core.span import Span

        s = Span(hours=25)
        assert s.days == 1
        assert s.hours == 1

    def test_full_cascade(self) -> None:
        """One nanosecond short of a day plus one nanosecond is one day."""
        from almanac.core.span import Span

        s = Span(
            hours=23,
            minutes=59,
            seconds=59,
            milliseconds=999,
            microseconds=999,
            nanoseconds=1000,
        )
        assert s.components() == (1, 0, 0, 0, 0, 0, 0)

    def test_large_nanoseconds(self) -> None:
        """A nanosecond count spreads over every field."""
        from almanac.core.span import Span

        s = Span.from_nanoseconds(90_061_001_002_003)
        assert s.components() == (1, 1, 1, 1, 1, 2, 3)

    def test_negative_borrows_from_days(self) -> None:
        """Negative spans keep sub-fields non-negative, days carry the sign."""
        from almanac.core.span import Span

        s = Span(minutes=-30)
        assert s.components() == (-1, 23, 30, 0, 0, 0, 0)
        assert s.is_negative
        assert s.total_nanoseconds == -30 * 60 * 1_000_000_000

    def test_fields_in_canonical_range(self) -> None:
        """Whatever goes in, every sub-day field ends up in range."""
        from almanac.core.span import Span

        for value in (-10**15, -1, 1, 10**15 + 7):
            s = Span(1, value, -value, value, -value, value, -value)
            assert 0 <= s.hours < 24
            assert 0 <= s.minutes < 60
            assert 0 <= s.seconds < 60
            assert 0 <= s.milliseconds < 1000
            assert 0 <= s.microseconds < 1000
            assert 0 <= s.nanoseconds < 1000

    def test_days_not_folded(self) -> None:
        """Days are never turned into months or years."""
        from almanac.core.span import Span

        assert Span(days=400).days == 400


class TestSpanTotals:
    """Tests for the channel totals."""

    def test_channel_split(self) -> None:
        """total_milliseconds and sub_millisecond_nanos split the span."""
        from almanac.core.span import Span

        s = Span(days=-1, hours=15, minutes=20, seconds=52,
                 milliseconds=658, microseconds=789, nanoseconds=337)
        assert s.total_milliseconds == -31147342
        assert s.sub_millisecond_nanos == 789337
        assert s.total_nanoseconds == -31147342 * 1_000_000 + 789337


class TestSpanArithmetic:
    """Tests for Span arithmetic."""

    def test_add_renormalizes(self) -> None:
        """Adding spans carries across fields."""
        from almanac.core.span import Span

        assert Span(seconds=45) + Span(seconds=30) == Span(minutes=1, seconds=15)
        assert (Span(hours=23) + Span(hours=2)).components() == (1, 1, 0, 0, 0, 0, 0)

    def test_subtract(self) -> None:
        """Subtracting borrows across fields."""
        from almanac.core.span import Span

        result = Span(days=1) - Span(nanoseconds=1)
        assert result.components() == (0, 23, 59, 59, 999, 999, 999)

    def test_negate_and_abs(self) -> None:
        """Negation flips the total, abs restores it."""
        from almanac.core.span import Span

        s = Span(hours=1)
        assert (-s).total_nanoseconds == -s.total_nanoseconds
        assert abs(-s) == s
        assert abs(s) == s

    def test_sum(self) -> None:
        """sum() works over spans."""
        from almanac.core.span import Span

        assert sum([Span(hours=12), Span(hours=12)]) == Span(days=1)

    def test_add_foreign_type(self) -> None:
        """Adding a non-Span raises TypeError."""
        from almanac.core.span import Span

        with pytest.raises(TypeError):
            Span() + 1  # type: ignore[operator]


class TestSpanComparison:
    """Tests for Span comparison."""

    def test_ordering(self) -> None:
        """Spans order by their components, days first."""
        from almanac.core.span import Span

        assert Span(hours=1) < Span(hours=2)
        assert Span(minutes=-1) < Span()
        assert Span(days=1) > Span(hours=23)

    def test_compare_to_and_equals(self) -> None:
        """compare_to and equals work on Spans."""
        from almanac.core.span import Span

        assert Span(hours=24).equals(Span(days=1))
        assert Span(hours=1).compare_to(Span(hours=2)) == -1
        assert Span(hours=2).compare_to(Span(hours=2)) == 0

    def test_type_mismatch(self) -> None:
        """compare_to and equals reject foreign values."""
        from almanac.core.span import Span
        from almanac.errors import TypeMismatchError

        with pytest.raises(TypeMismatchError):
            Span().compare_to(0)  # type: ignore[arg-type]
        with pytest.raises(TypeMismatchError):
            Span().equals("1 day")  # type: ignore[arg-type]

    def test_hashable(self) -> None:
        """Equal spans hash equally."""
        from almanac.core.span import Span

        assert hash(Span(hours=24)) == hash(Span(days=1))
        assert len({Span(hours=24), Span(days=1)}) == 1


class TestSpanString:
    """Tests for Span string forms."""

    def test_str(self) -> None:
        """str looks like a timedelta with nine fractional digits."""
        from almanac.core.span import Span

        assert str(Span(days=1, hours=2, minutes=30, seconds=45, nanoseconds=1)) == (
            "1 day, 2:30:45.000000001"
        )
        assert str(Span(days=3)) == "3 days, 0:00:00"
        assert str(Span(minutes=5)) == "0:05:00"

    def test_repr(self) -> None:
        """repr lists every component."""
        from almanac.core.span import Span

        assert repr(Span(hours=25)) == (
            "Span(days=1, hours=1, minutes=0, seconds=0, "
            "milliseconds=0, microseconds=0, nanoseconds=0)"
        )
