"""Instant class representing a point on the linear time axis.

An Instant is measured from the Unix epoch (1970-01-01T00:00:00Z) on two
channels: a signed millisecond count (``coarse``) and a sub-millisecond
nanosecond counter (``fine``).
"""

from __future__ import annotations

import time

from almanac._internal.constants import NANOS_PER_MILLISECOND
from almanac.errors import TypeMismatchError


class Instant:
    """A point in time with nanosecond resolution.

    The ``fine`` channel is only meaningful relative to ``coarse``. Values
    produced by this library keep it in ``[0, 1_000_000)``, i.e.
    ``microsecond * 1000 + nanosecond`` of the calendar value it came from,
    but an Instant never clamps it on its own.

    Instant has no arithmetic. Moving through time is done by the steppers
    acting on a CalendarSeed.

    Attributes:
        coarse: Signed milliseconds since the epoch.
        fine: Nanoseconds past ``coarse``.

    Examples:
        >>> Instant(1577836800000)
        Instant(coarse=1577836800000, fine=0)

        >>> Instant(0, 5) > Instant(0, 4)
        True
    """

    __slots__ = ("coarse", "fine")

    def __init__(self, coarse: int, fine: int = 0) -> None:
        self.coarse: int = coarse
        self.fine: int = fine

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant from the system clock.

        Returns:
            An Instant with a canonical fine channel.
        """
        coarse, fine = divmod(time.time_ns(), NANOS_PER_MILLISECOND)
        return cls(coarse, fine)

    def copy(self) -> Instant:
        """Return an independent Instant with the same channels."""
        return Instant(self.coarse, self.fine)

    def assign(self, other: Instant) -> Instant:
        """Overwrite both channels with those of ``other``.

        Returns:
            This instant, for chaining.

        Raises:
            TypeMismatchError: If other is not an Instant.
        """
        if not isinstance(other, Instant):
            raise TypeMismatchError(
                f"cannot assign {type(other).__name__} to Instant"
            )
        self.coarse = other.coarse
        self.fine = other.fine
        return self

    def compare_to(self, other: Instant) -> int:
        """Compare lexicographically on (coarse, fine).

        Returns:
            -1, 0 or 1.

        Raises:
            TypeMismatchError: If other is not an Instant.
        """
        if not isinstance(other, Instant):
            raise TypeMismatchError(
                f"cannot compare Instant with {type(other).__name__}"
            )
        mine, theirs = self._key(), other._key()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def equals(self, other: Instant) -> bool:
        """Return True if both channels match exactly.

        Raises:
            TypeMismatchError: If other is not an Instant.
        """
        if not isinstance(other, Instant):
            raise TypeMismatchError(
                f"cannot equate Instant with {type(other).__name__}"
            )
        return self._key() == other._key()

    def _key(self) -> tuple[int, int]:
        return (self.coarse, self.fine)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    # Mutable through assign(), so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Instant(coarse={self.coarse}, fine={self.fine})"


__all__ = ["Instant"]
