"""Calendar field validation for Tempus.

check_fields is the single entry point used by every Instant constructor
that accepts calendar fields. Fields are checked in a fixed order and the
first violation is reported as a RangeError naming the field.

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.calendar import days_in_month
from tempus._internal.constants import (
    MAX_HOUR,
    MAX_MILLISECOND,
    MAX_MINUTE,
    MAX_MONTH,
    MAX_SECOND,
    MIN_MONTH,
)
from tempus.errors import RangeError


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful calendar field
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _check_bounds(name: str, value: int, minimum: int, maximum: int) -> None:
    _require_int(name, value)
    if value < minimum or value > maximum:
        raise RangeError(name, minimum, maximum, value)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        RangeError: If month is outside 1-12.
    """
    _check_bounds("month", month, MIN_MONTH, MAX_MONTH)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day exists in the given year and month.

    The month must already be valid.

    Raises:
        RangeError: If day is outside 1 through the length of the month.
    """
    _check_bounds("day", day, 1, days_in_month(year, month))


def validate_time(
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> None:
    """Validate time-of-day fields in the order hour, minute, second, millisecond.

    Raises:
        RangeError: For the first field outside its range.
    """
    _check_bounds("hour", hour, 0, MAX_HOUR)
    _check_bounds("minute", minute, 0, MAX_MINUTE)
    _check_bounds("second", second, 0, MAX_SECOND)
    _check_bounds("millisecond", millisecond, 0, MAX_MILLISECOND)


def check_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> None:
    """Validate a full set of calendar fields.

    Checks short-circuit in the order month, day, hour, minute, second,
    millisecond. The year itself is unbounded; it only decides whether
    February has 29 days.

    Args:
        year: The year (any int).
        month: The month (1-12).
        day: The day (1 through the days in the month).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).

    Raises:
        RangeError: For the first field outside its range.
        TypeError: If any field is not an int.

    Examples:
        >>> check_fields(2024, 2, 29)
        >>> check_fields(2023, 2, 29)
        Traceback (most recent call last):
        ...
        tempus.errors.RangeError: day must be between 1 and 28, got 29
    """
    _require_int("year", year)
    validate_month(month)
    validate_day(year, month, day)
    validate_time(hour, minute, second, millisecond)


__all__ = [
    "check_fields",
    "validate_month",
    "validate_day",
    "validate_time",
]
