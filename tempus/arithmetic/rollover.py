"""Calendar rollover for instants.

This module applies field deltas to an instant using calendar rules
instead of fixed-length arithmetic. Every function takes and returns
milliseconds since the Unix epoch and needs the Timezone the calendar
fields are read in.

Two kinds of field are distinguished:

    - Calendar fields (years, months, days) move the wall-clock date and
      keep the wall-clock time of day. Overflowing a month carries into
      the next month, overflowing December carries into the next year.
    - Clock fields (hours, minutes, seconds, milliseconds) are elapsed
      time and are added to the instant directly.

Month and year arithmetic clamps the day of month:
    2024-01-31 + 1 month -> 2024-02-29  # leap year
    2023-01-31 + 1 month -> 2023-02-28
    2024-02-29 + 1 year  -> 2025-02-28
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempus._internal.calendar import (
    days_in_month,
    fields_to_wall_millis,
    wall_millis_to_fields,
)
from tempus._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
)

if TYPE_CHECKING:
    from tempus.core.duration import Duration
    from tempus.units.timezone import Timezone


def add_days(millis: int, days: int, timezone: Timezone) -> int:
    """Move an instant by whole calendar days, keeping the wall time.

    Examples:
        >>> from tempus.units.timezone import Timezone
        >>> add_days(0, 1, Timezone.utc())
        86400000
    """
    if days == 0:
        return millis
    epoch_day, time_of_day = divmod(timezone.to_wall_millis(millis), MILLIS_PER_DAY)
    return timezone.to_utc_millis((epoch_day + days) * MILLIS_PER_DAY + time_of_day)


def add_months(millis: int, months: int, timezone: Timezone) -> int:
    """Move an instant by calendar months, clamping the day of month.

    Args:
        millis: The instant, in milliseconds since the epoch.
        months: Months to add (can be negative).
        timezone: Zone the calendar fields are read in.

    Returns:
        The shifted instant. The time of day is preserved.
    """
    if months == 0:
        return millis
    year, month, day, hour, minute, second, ms = wall_millis_to_fields(
        timezone.to_wall_millis(millis)
    )

    total_months = year * 12 + (month - 1) + months
    year, month_index = divmod(total_months, 12)
    month = month_index + 1
    day = min(day, days_in_month(year, month))

    wall = fields_to_wall_millis(year, month, day, hour, minute, second, ms)
    return timezone.to_utc_millis(wall)


def add_years(millis: int, years: int, timezone: Timezone) -> int:
    """Move an instant by calendar years, clamping February 29."""
    return add_months(millis, years * 12, timezone)


def add_clock(
    millis: int,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
) -> int:
    """Add elapsed clock time to an instant."""
    return (
        millis
        + hours * MILLIS_PER_HOUR
        + minutes * MILLIS_PER_MINUTE
        + seconds * MILLIS_PER_SECOND
        + milliseconds
    )


def add_fractional(millis: int, amount: float, unit_seconds: int, timezone: Timezone) -> int:
    """Add a possibly fractional amount of a unit, truncated to whole seconds.

    ``amount * unit_seconds`` is truncated toward zero. Whole days within
    the result are applied as calendar days, the rest as elapsed seconds.

    Examples:
        >>> from tempus.units.timezone import Timezone
        >>> add_fractional(0, 1.5, 3600, Timezone.utc())  # 1.5 hours
        5400000
    """
    total_seconds = int(amount * unit_seconds)
    days, seconds = divmod(abs(total_seconds), SECONDS_PER_DAY)
    if total_seconds < 0:
        days, seconds = -days, -seconds
    return add_clock(add_days(millis, days, timezone), seconds=seconds)


def apply_fields(
    millis: int,
    timezone: Timezone,
    *,
    years: int = 0,
    months: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
) -> int:
    """Apply field deltas in the order years, months, days, then clock fields."""
    millis = add_years(millis, years, timezone)
    millis = add_months(millis, months, timezone)
    millis = add_days(millis, days, timezone)
    return add_clock(millis, hours, minutes, seconds, milliseconds)


def apply_duration(millis: int, duration: Duration, timezone: Timezone) -> int:
    """Apply a Duration: days as calendar days, the remaining fields as elapsed time."""
    return apply_fields(
        millis,
        timezone,
        days=duration.days,
        hours=duration.hours,
        minutes=duration.minutes,
        seconds=duration.seconds,
        milliseconds=duration.milliseconds,
    )


def remove_duration(millis: int, duration: Duration, timezone: Timezone) -> int:
    """Undo apply_duration: elapsed fields are taken off first, calendar days last.

    ``remove_duration(apply_duration(t, d, tz), d, tz) == t`` holds even
    when the elapsed part crosses a daylight saving transition.
    """
    millis = add_clock(
        millis,
        -duration.hours,
        -duration.minutes,
        -duration.seconds,
        -duration.milliseconds,
    )
    return add_days(millis, -duration.days, timezone)


__all__ = [
    "add_days",
    "add_months",
    "add_years",
    "add_clock",
    "add_fractional",
    "apply_fields",
    "apply_duration",
    "remove_duration",
]
