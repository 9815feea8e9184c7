"""Duration class representing an elapsed span as separate fields.

This module provides the Duration class: a flat, signed tuple of days,
hours, minutes, seconds and milliseconds. Fields are stored exactly as
given and never carried into one another automatically.
"""

from __future__ import annotations

from tempus._internal.constants import (
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """divmod rounding toward zero, so the remainder keeps the sign of value."""
    quotient, remainder = divmod(abs(value), divisor)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


class Duration:
    """A span of time held as days, hours, minutes, seconds and milliseconds.

    Duration is a flat record rather than a single normalized magnitude.
    ``Duration(hours=30)`` keeps ``hours == 30``; nothing is folded into
    ``days`` unless normalized() is called. Equality and hashing compare
    all five fields component-wise, so ``Duration(hours=24)`` and
    ``Duration(days=1)`` are different values with the same total.

    Attributes:
        days: The days field.
        hours: The hours field (conventionally 0-23).
        minutes: The minutes field (conventionally 0-59).
        seconds: The seconds field (conventionally 0-59).
        milliseconds: The milliseconds field (conventionally 0-999).

    Examples:
        >>> d = Duration(days=1, hours=2, minutes=3, seconds=4, milliseconds=5)
        >>> d.total_seconds
        93784
        >>> str(d)
        '1.02:03:04.005'

        >>> Duration(hours=30).hours
        30
    """

    __slots__ = ("_days", "_hours", "_minutes", "_seconds", "_milliseconds")

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> None:
        """Create a Duration from its fields.

        No range validation is performed; any int is accepted for any field.

        Raises:
            TypeError: If a field is not an int.
        """
        for name, value in (
            ("days", days),
            ("hours", hours),
            ("minutes", minutes),
            ("seconds", seconds),
            ("milliseconds", milliseconds),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")

        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._milliseconds = milliseconds

    @classmethod
    def zero(cls) -> Duration:
        """Create a Duration with every field set to zero."""
        return cls()

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        """Decompose a millisecond count into day/hour/minute/second/millisecond.

        Division truncates toward zero with fixed unit sizes (86400 s per
        day, 3600 s per hour, 60 s per minute), so the sign of the input
        appears on every non-zero field.

        Examples:
            >>> Duration.from_milliseconds(90_061_001)
            Duration(days=1, hours=1, minutes=1, seconds=1, milliseconds=1)

            >>> Duration.from_milliseconds(-1_500)
            Duration(days=0, hours=0, minutes=0, seconds=-1, milliseconds=-500)
        """
        seconds, millis = _trunc_divmod(milliseconds, MILLIS_PER_SECOND)
        days, seconds = _trunc_divmod(seconds, SECONDS_PER_DAY)
        hours, seconds = _trunc_divmod(seconds, SECONDS_PER_HOUR)
        minutes, seconds = _trunc_divmod(seconds, SECONDS_PER_MINUTE)
        return cls(days, hours, minutes, seconds, millis)

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    @property
    def total_seconds(self) -> int:
        """Return the whole-second total, excluding the milliseconds field.

        Examples:
            >>> Duration(days=1, hours=2, minutes=3, seconds=4, milliseconds=999).total_seconds
            93784
        """
        return (
            self._days * SECONDS_PER_DAY
            + self._hours * SECONDS_PER_HOUR
            + self._minutes * SECONDS_PER_MINUTE
            + self._seconds
        )

    @property
    def total_milliseconds(self) -> int:
        """Return total_seconds * 1000 plus the milliseconds field."""
        return self.total_seconds * MILLIS_PER_SECOND + self._milliseconds

    @property
    def total_hours(self) -> float:
        """Return total_seconds expressed in hours."""
        return self.total_seconds / 3600.0

    @property
    def is_zero(self) -> bool:
        return (
            self._days == 0
            and self._hours == 0
            and self._minutes == 0
            and self._seconds == 0
            and self._milliseconds == 0
        )

    @property
    def is_negative(self) -> bool:
        """Return True if the fields add up to less than zero."""
        return self.total_milliseconds < 0

    def normalized(self) -> Duration:
        """Return the same total carried into conventional field ranges.

        Examples:
            >>> Duration(hours=30).normalized()
            Duration(days=1, hours=6, minutes=0, seconds=0, milliseconds=0)
        """
        return Duration.from_milliseconds(self.total_milliseconds)

    def to_text(self) -> str:
        """Render as ``D.HH:MM:SS.mmm``.

        Days are unpadded. Negative fields keep their minus sign inside
        the padded width.

        Examples:
            >>> Duration(days=3, hours=4, minutes=5, seconds=6, milliseconds=7).to_text()
            '3.04:05:06.007'
        """
        return (
            f"{self._days}.{self._hours:02d}:{self._minutes:02d}:"
            f"{self._seconds:02d}.{self._milliseconds:03d}"
        )

    def _fields(self) -> tuple[int, int, int, int, int]:
        return (
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    def __add__(self, other: object) -> Duration:
        """Add two durations field by field, without carrying."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(*(a + b for a, b in zip(self._fields(), other._fields())))

    def __sub__(self, other: object) -> Duration:
        """Subtract two durations field by field, without carrying."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(*(a - b for a, b in zip(self._fields(), other._fields())))

    def __neg__(self) -> Duration:
        """Return the duration with every field negated."""
        return Duration(*(-value for value in self._fields()))

    def __pos__(self) -> Duration:
        return Duration(*self._fields())

    def __eq__(self, other: object) -> bool:
        """Check component-wise equality with another duration.

        Examples:
            >>> Duration(days=1) == Duration(hours=24)
            False
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        return (
            f"Duration(days={self._days}, hours={self._hours}, "
            f"minutes={self._minutes}, seconds={self._seconds}, "
            f"milliseconds={self._milliseconds})"
        )

    def __str__(self) -> str:
        return self.to_text()

    def __bool__(self) -> bool:
        """Return True if any field is non-zero."""
        return not self.is_zero


__all__ = ["Duration"]
