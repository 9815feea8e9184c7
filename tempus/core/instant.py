"""Instant class representing a point in time.

This module provides the Instant class: an absolute instant with
millisecond resolution, stored as milliseconds since the Unix epoch
(1970-01-01T00:00:00Z) together with an output pattern and the zone its
calendar fields are read in.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import time
from typing import overload

from tempus._internal.calendar import (
    Fields,
    day_of_week,
    fields_to_wall_millis,
    is_leap_year,
    wall_millis_to_fields,
)
from tempus._internal.constants import (
    DEFAULT_PATTERN,
    MILLIS_PER_DAY,
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_MILLIS_DIGITS,
    UNIX_SECONDS_DIGITS,
)
from tempus._internal.validation import check_fields
from tempus.arithmetic import rollover
from tempus.core.duration import Duration
from tempus.errors import ValidationError
from tempus.format.pattern import format_pattern, parse_pattern
from tempus.units.timezone import Timezone

logger = logging.getLogger(__name__)

_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


class Instant:
    """An absolute point in time with millisecond resolution.

    Instant stores a signed millisecond count since the Unix epoch. The
    calendar fields (year, month, ...) are derived from that count in the
    instant's timezone, which defaults to the host's default zone.

    Instants are immutable. Arithmetic returns a new Instant that keeps
    the pattern and timezone of the original. Equality, ordering and
    hashing look at the millisecond count only.

    Attributes:
        millis: Milliseconds since 1970-01-01T00:00:00Z (can be negative).
        pattern: Output pattern used by to_text() and str().
        timezone: Zone used to read and write calendar fields.

    Examples:
        >>> utc = Timezone.utc()
        >>> t = Instant(2024, 1, 31, 12, 0, 0, timezone=utc)
        >>> str(t)
        '2024-01-31 12:00:00'
        >>> str(t.add_months(1))
        '2024-02-29 12:00:00'
        >>> (t.add_days(1) - t).days
        1
    """

    __slots__ = ("_millis", "_pattern", "_tz")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> None:
        """Create an Instant from calendar fields.

        With only year, month and day the instant is midnight of that date.

        Args:
            year: The year.
            month: The month (1-12).
            day: The day (1 through the number of days in month).
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).
            pattern: Output pattern.
            timezone: Zone the fields are given in (host zone if None).

        Raises:
            RangeError: If any field is out of range.

        Examples:
            >>> Instant(1970, 1, 1, timezone=Timezone.utc()).millis
            0
        """
        check_fields(year, month, day, hour, minute, second, millisecond)
        tz = timezone if timezone is not None else Timezone.local()
        wall = fields_to_wall_millis(year, month, day, hour, minute, second, millisecond)

        self._millis: int = tz.to_utc_millis(wall)
        self._pattern: str = pattern
        self._tz: Timezone = tz

    @classmethod
    def _from_internal(cls, millis: int, pattern: str, tz: Timezone) -> Instant:
        """Create an Instant from a millisecond count, bypassing validation."""
        instance = object.__new__(cls)
        instance._millis = millis
        instance._pattern = pattern
        instance._tz = tz
        return instance

    @classmethod
    def now(
        cls,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Return the current instant from the host clock."""
        return cls.from_millis(time.time_ns() // 1_000_000, pattern=pattern, timezone=timezone)

    @classmethod
    def from_millis(
        cls,
        millis: int,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch."""
        _require_int("millis", millis)
        tz = timezone if timezone is not None else Timezone.local()
        return cls._from_internal(millis, pattern, tz)

    @classmethod
    def from_unix_seconds(
        cls,
        seconds: int,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Create an Instant from seconds since the Unix epoch."""
        _require_int("seconds", seconds)
        return cls.from_millis(seconds * MILLIS_PER_SECOND, pattern=pattern, timezone=timezone)

    @classmethod
    def from_timestamp(
        cls,
        value: int,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Create an Instant from a timestamp whose unit is inferred from its length.

        A value with 10 decimal digits is read as Unix seconds, one with
        13 digits as milliseconds. The sign is ignored when counting.
        Prefer from_unix_seconds() or from_millis() when the unit is known.

        Args:
            value: Unix seconds or milliseconds.

        Raises:
            ValidationError: If the value has any other number of digits.

        Examples:
            >>> utc = Timezone.utc()
            >>> Instant.from_timestamp(1700000000, timezone=utc).millis
            1700000000000
            >>> Instant.from_timestamp(1700000000000, timezone=utc).millis
            1700000000000
        """
        _require_int("value", value)
        digits = len(str(abs(value)))
        if digits == UNIX_SECONDS_DIGITS:
            logger.debug("timestamp %d read as unix seconds", value)
            return cls.from_unix_seconds(value, pattern=pattern, timezone=timezone)
        if digits == UNIX_MILLIS_DIGITS:
            logger.debug("timestamp %d read as milliseconds", value)
            return cls.from_millis(value, pattern=pattern, timezone=timezone)
        raise ValidationError(
            f"timestamp must have {UNIX_SECONDS_DIGITS} digits (seconds) or "
            f"{UNIX_MILLIS_DIGITS} digits (milliseconds), got {digits}: {value}"
        )

    @classmethod
    def from_datetime(
        cls,
        value: _datetime.datetime,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Wrap a standard library datetime.

        An aware datetime maps to the exact same instant. A naive datetime
        is read as wall time in ``timezone`` (the host zone if None).
        Microseconds are truncated to milliseconds.
        """
        tz = timezone if timezone is not None else Timezone.local()
        if value.tzinfo is not None and value.utcoffset() is not None:
            millis = (value - _UNIX_EPOCH) // _datetime.timedelta(milliseconds=1)
            return cls._from_internal(millis, pattern, tz)

        wall = fields_to_wall_millis(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond // 1000,
        )
        return cls._from_internal(tz.to_utc_millis(wall), pattern, tz)

    @classmethod
    def from_date(
        cls,
        value: _datetime.date,
        *,
        pattern: str = DEFAULT_PATTERN,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Wrap a standard library date as midnight of that day."""
        if isinstance(value, _datetime.datetime):
            return cls.from_datetime(value, pattern=pattern, timezone=timezone)
        return cls(value.year, value.month, value.day, pattern=pattern, timezone=timezone)

    @classmethod
    def parse(
        cls,
        text: str,
        pattern: str = DEFAULT_PATTERN,
        *,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Parse text written with a pattern.

        The pattern becomes the output pattern of the result.

        Raises:
            ParseError: If the text does not match the pattern.
            RangeError: If a parsed field is out of range.

        Examples:
            >>> t = Instant.parse("2024-02-29 08:15:00", timezone=Timezone.utc())
            >>> t.day, t.hour
            (29, 8)
        """
        fields = parse_pattern(text, pattern)
        return cls(*fields, pattern=pattern, timezone=timezone)

    # Stored values

    @property
    def millis(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00Z."""
        return self._millis

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def timezone(self) -> Timezone:
        return self._tz

    def with_millis(self, millis: int) -> Instant:
        """Return an Instant at another millisecond count, same pattern and zone."""
        _require_int("millis", millis)
        return Instant._from_internal(millis, self._pattern, self._tz)

    def with_pattern(self, pattern: str) -> Instant:
        """Return the same instant with another output pattern."""
        return Instant._from_internal(self._millis, pattern, self._tz)

    def with_timezone(self, timezone: Timezone) -> Instant:
        """Return the same instant read in another zone."""
        return Instant._from_internal(self._millis, self._pattern, timezone)

    # Calendar fields in the instant's zone

    def fields(self) -> Fields:
        """Return (year, month, day, hour, minute, second, millisecond)."""
        return wall_millis_to_fields(self._tz.to_wall_millis(self._millis))

    @property
    def year(self) -> int:
        return self.fields()[0]

    @property
    def month(self) -> int:
        return self.fields()[1]

    @property
    def day(self) -> int:
        return self.fields()[2]

    @property
    def hour(self) -> int:
        return self.fields()[3]

    @property
    def minute(self) -> int:
        return self.fields()[4]

    @property
    def second(self) -> int:
        return self.fields()[5]

    @property
    def millisecond(self) -> int:
        return self.fields()[6]

    @property
    def day_of_week(self) -> int:
        """Return the day of week (Monday=0, Sunday=6)."""
        return day_of_week(self._tz.to_wall_millis(self._millis) // MILLIS_PER_DAY)

    def is_leap_year(self) -> bool:
        """Return True if the instant's calendar year is a leap year."""
        return is_leap_year(self.year)

    # Conversions

    def unix_seconds(self) -> int:
        """Return whole seconds since the epoch, truncated toward zero.

        Examples:
            >>> Instant.from_millis(-1500).unix_seconds()
            -1
        """
        if self._millis < 0:
            return -(-self._millis // MILLIS_PER_SECOND)
        return self._millis // MILLIS_PER_SECOND

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware standard library datetime at the instant's offset.

        Raises:
            OverflowError: If the instant is outside the datetime range.
        """
        offset = _datetime.timedelta(seconds=self._tz.offset_at(self._millis))
        utc = _UNIX_EPOCH + _datetime.timedelta(milliseconds=self._millis)
        return utc.astimezone(_datetime.timezone(offset))

    def to_text(self, pattern: str | None = None) -> str:
        """Render the instant with its pattern, or with ``pattern`` if given.

        Examples:
            >>> t = Instant(2024, 1, 15, 14, 30, 45, timezone=Timezone.utc())
            >>> t.to_text()
            '2024-01-15 14:30:45'
            >>> t.to_text("dd/MM/yyyy")
            '15/01/2024'
        """
        return format_pattern(self.fields(), pattern if pattern is not None else self._pattern)

    # Arithmetic

    def _shifted(self, millis: int) -> Instant:
        return Instant._from_internal(millis, self._pattern, self._tz)

    def add(self, duration: Duration) -> Instant:
        """Return the instant moved forward by a Duration.

        Days are calendar days (the wall time is kept across month and
        year boundaries); hours, minutes, seconds and milliseconds are
        elapsed time.
        """
        if not isinstance(duration, Duration):
            raise TypeError(f"expected Duration, got {type(duration).__name__}")
        return self._shifted(rollover.apply_duration(self._millis, duration, self._tz))

    @overload
    def minus(self, other: Duration) -> Instant: ...

    @overload
    def minus(self, other: Instant) -> Duration: ...

    def minus(self, other: Duration | Instant) -> Instant | Duration:
        """Subtract a Duration (giving an Instant) or an Instant (giving a Duration).

        The difference of two instants is the elapsed time between them,
        decomposed with fixed unit sizes. It is always computed from the
        millisecond values, and a negative difference is negative in
        every non-zero field.

        Examples:
            >>> a = Instant.from_millis(90_061_001)
            >>> a.minus(Instant.from_millis(0))
            Duration(days=1, hours=1, minutes=1, seconds=1, milliseconds=1)
        """
        if isinstance(other, Instant):
            return Duration.from_milliseconds(self._millis - other._millis)
        if isinstance(other, Duration):
            return self._shifted(rollover.remove_duration(self._millis, other, self._tz))
        raise TypeError(f"expected Duration or Instant, got {type(other).__name__}")

    def add_days(self, days: float) -> Instant:
        """Add days; a fractional part is truncated to whole seconds."""
        return self._shifted(rollover.add_fractional(self._millis, days, SECONDS_PER_DAY, self._tz))

    def add_hours(self, hours: float) -> Instant:
        """Add hours; a fractional part is truncated to whole seconds.

        Examples:
            >>> Instant.from_millis(0).add_hours(1.5).millis
            5400000
        """
        return self._shifted(rollover.add_fractional(self._millis, hours, SECONDS_PER_HOUR, self._tz))

    def add_minutes(self, minutes: float) -> Instant:
        """Add minutes; a fractional part is truncated to whole seconds."""
        return self._shifted(
            rollover.add_fractional(self._millis, minutes, SECONDS_PER_MINUTE, self._tz)
        )

    def add_seconds(self, seconds: int) -> Instant:
        _require_int("seconds", seconds)
        return self._shifted(rollover.add_clock(self._millis, seconds=seconds))

    def add_milliseconds(self, milliseconds: int) -> Instant:
        _require_int("milliseconds", milliseconds)
        return self._shifted(rollover.add_clock(self._millis, milliseconds=milliseconds))

    def add_months(self, months: int) -> Instant:
        """Add calendar months, clamping the day to the target month length."""
        _require_int("months", months)
        return self._shifted(rollover.add_months(self._millis, months, self._tz))

    def add_years(self, years: int) -> Instant:
        """Add calendar years; February 29 becomes February 28 in common years."""
        _require_int("years", years)
        return self._shifted(rollover.add_years(self._millis, years, self._tz))

    def add_fields(
        self,
        *,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> Instant:
        """Apply several field deltas at once, largest field first.

        Examples:
            >>> t = Instant(2023, 1, 31, timezone=Timezone.utc())
            >>> str(t.add_fields(months=1, days=1))
            '2023-03-01 00:00:00'
        """
        for name, value in (
            ("years", years),
            ("months", months),
            ("days", days),
            ("hours", hours),
            ("minutes", minutes),
            ("seconds", seconds),
            ("milliseconds", milliseconds),
        ):
            _require_int(name, value)
        return self._shifted(
            rollover.apply_fields(
                self._millis,
                self._tz,
                years=years,
                months=months,
                days=days,
                hours=hours,
                minutes=minutes,
                seconds=seconds,
                milliseconds=milliseconds,
            )
        )

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        if not isinstance(other, (Duration, Instant)):
            return NotImplemented
        return self.minus(other)

    # Comparison

    def compare_to(self, other: Instant) -> int:
        """Return -1, 0 or 1 as this instant is before, equal to or after other."""
        if not isinstance(other, Instant):
            raise TypeError(f"expected Instant, got {type(other).__name__}")
        delta = self._millis - other._millis
        return (delta > 0) - (delta < 0)

    def __eq__(self, other: object) -> bool:
        """Instants are equal when their millisecond counts are equal.

        Pattern and timezone do not take part in equality.
        """
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis == other._millis

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(self._millis)

    def __repr__(self) -> str:
        return f"Instant.from_millis({self._millis}, pattern={self._pattern!r}, timezone={self._tz!r})"

    def __str__(self) -> str:
        return self.to_text()


__all__ = ["Instant"]
