"""Calendar utilities for Tempus.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: leap year logic, month lengths and the
conversion between calendar dates and epoch days.

Epoch day 0 = 1970-01-01

Wall milliseconds are milliseconds since 1970-01-01 00:00 of a clock
that has no timezone attached; applying a Timezone turns them into an
instant (see tempus.units.timezone).

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.constants import (
    DAYS_IN_MONTH,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)

# (year, month, day, hour, minute, second, millisecond)
Fields = tuple[int, int, int, int, int, int, int]


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# A 400-year Gregorian cycle always has the same number of days
_DAYS_PER_400_YEARS = 146097


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1, the ordinal for 0000-12-31 is 0.
    Works for zero and negative years.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Python's // floors toward negative infinity, which keeps the
    # formula valid before year 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # Shift non-positive ordinals forward by whole 400-year cycles so the
    # cycle decomposition below only ever sees n >= 0
    year_shift = 0
    if ordinal <= 0:
        cycles = (-ordinal) // _DAYS_PER_400_YEARS + 1
        ordinal += cycles * _DAYS_PER_400_YEARS
        year_shift = -400 * cycles

    n = ordinal - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1 + year_shift

    # Last day of a leap cycle lands one past the end of the divmod chain
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert 1-indexed day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    return ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ordinal_to_ymd(epoch_day + _EPOCH_ORDINAL)


def day_of_week(epoch_day: int) -> int:
    """Return the day of week for an epoch day (Monday=0, Sunday=6).

    1970-01-01 was a Thursday.
    """
    return (epoch_day + 3) % 7


def fields_to_wall_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Combine calendar fields into wall milliseconds.

    The fields are not validated; callers run check_fields first.
    """
    return (
        ymd_to_epoch_day(year, month, day) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def wall_millis_to_fields(wall_millis: int) -> Fields:
    """Split wall milliseconds into calendar fields.

    Examples:
        >>> wall_millis_to_fields(-1)
        (1969, 12, 31, 23, 59, 59, 999)
    """
    epoch_day, rem = divmod(wall_millis, MILLIS_PER_DAY)
    year, month, day = epoch_day_to_ymd(epoch_day)
    hour, rem = divmod(rem, MILLIS_PER_HOUR)
    minute, rem = divmod(rem, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rem, MILLIS_PER_SECOND)
    return (year, month, day, hour, minute, second, millisecond)


__all__ = [
    "Fields",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "day_of_week",
    "fields_to_wall_millis",
    "wall_millis_to_fields",
]
