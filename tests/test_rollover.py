"""Tests for calendar rollover arithmetic."""

from __future__ import annotations

import pytest

from tempus import Duration, Instant, Timezone
from tempus.arithmetic import (
    add_clock,
    add_days,
    add_fractional,
    add_months,
    add_years,
    apply_duration,
    apply_fields,
    remove_duration,
)

HOUR = 3_600_000
DAY = 24 * HOUR


def at(*fields: int) -> Instant:
    return Instant(*fields, timezone=Timezone.utc())


class TestDayCarry:
    """Tests for days rolling into months and years."""

    def test_month_end(self) -> None:
        assert (at(2024, 1, 31) + Duration(days=1)).fields()[:3] == (2024, 2, 1)

    def test_leap_february(self) -> None:
        assert (at(2024, 2, 28) + Duration(days=1)).fields()[:3] == (2024, 2, 29)
        assert (at(2024, 2, 28) + Duration(days=2)).fields()[:3] == (2024, 3, 1)

    def test_common_february(self) -> None:
        assert (at(2023, 2, 28) + Duration(days=1)).fields()[:3] == (2023, 3, 1)

    def test_year_end(self) -> None:
        assert (at(2023, 12, 31, 23) + Duration(hours=2)).fields()[:4] == (2024, 1, 1, 1)

    def test_negative_days_cross_month(self) -> None:
        assert (at(2024, 3, 1) - Duration(days=1)).fields()[:3] == (2024, 2, 29)

    def test_large_day_count(self) -> None:
        assert (at(2024, 1, 1) + Duration(days=366)).fields()[:3] == (2025, 1, 1)

    def test_unnormalized_hours(self) -> None:
        assert (at(2024, 1, 1) + Duration(hours=30)).fields()[:4] == (2024, 1, 2, 6)


class TestMonthCarry:
    """Tests for add_months and add_years."""

    @pytest.mark.parametrize(
        ("start", "months", "expected"),
        [
            ((2024, 1, 31), 1, (2024, 2, 29)),
            ((2023, 1, 31), 1, (2023, 2, 28)),
            ((2024, 3, 31), 1, (2024, 4, 30)),
            ((2024, 11, 15), 3, (2025, 2, 15)),
            ((2024, 1, 15), -1, (2023, 12, 15)),
            ((2024, 1, 15), -13, (2022, 12, 15)),
            ((2024, 5, 31), 12, (2025, 5, 31)),
        ],
    )
    def test_add_months(self, start: tuple, months: int, expected: tuple) -> None:
        assert at(*start).add_months(months).fields()[:3] == expected

    def test_add_months_keeps_time(self) -> None:
        assert at(2024, 1, 31, 14, 30, 15, 250).add_months(1).fields() == (
            2024, 2, 29, 14, 30, 15, 250,
        )

    def test_add_years_clamps_leap_day(self) -> None:
        assert at(2024, 2, 29).add_years(1).fields()[:3] == (2025, 2, 28)
        assert at(2024, 2, 29).add_years(4).fields()[:3] == (2028, 2, 29)
        assert at(2024, 2, 29).add_years(-100).fields()[:3] == (1924, 2, 29)
        assert at(2000, 2, 29).add_years(100).fields()[:3] == (2100, 2, 28)

    def test_add_fields_order(self) -> None:
        # Months first, then days: Jan 31 -> Feb 28 -> Mar 1
        assert at(2023, 1, 31).add_fields(months=1, days=1).fields()[:3] == (2023, 3, 1)
        assert at(2023, 1, 31).add_fields(years=1, months=1).fields()[:3] == (2024, 2, 29)


class TestFractionalUnits:
    """Tests for add_days, add_hours and add_minutes with fractions."""

    def test_add_hours_fraction(self) -> None:
        assert at(2024, 1, 1).add_hours(1.5).millis - at(2024, 1, 1).millis == 5400 * 1000

    def test_add_days_fraction(self) -> None:
        assert at(2024, 1, 31, 12).add_days(1.5).fields()[:4] == (2024, 2, 2, 0)

    def test_add_days_negative_fraction(self) -> None:
        assert at(2024, 3, 1).add_days(-0.5).fields()[:4] == (2024, 2, 29, 12)

    def test_add_minutes_fraction(self) -> None:
        assert at(2024, 1, 1).add_minutes(0.75).fields()[4:6] == (0, 45)

    def test_truncates_to_whole_seconds(self) -> None:
        start = at(2024, 1, 1)
        assert start.add_hours(1.9999999).millis - start.millis == 7199 * 1000
        assert start.add_minutes(-0.01).millis - start.millis == 0

    def test_integral_units(self) -> None:
        start = at(2024, 1, 1)
        assert start.add_seconds(61).fields()[4:6] == (1, 1)
        assert start.add_milliseconds(-1).fields() == (2023, 12, 31, 23, 59, 59, 999)


class TestRolloverFunctions:
    """Tests for the rollover functions on raw milliseconds."""

    def test_add_days_utc(self) -> None:
        assert add_days(0, 1, Timezone.utc()) == DAY
        assert add_days(0, -1, Timezone.utc()) == -DAY

    def test_add_days_fixed_offset_keeps_wall_time(self) -> None:
        tz = Timezone.from_hours(-5)
        assert add_days(123, 10, tz) == 123 + 10 * DAY

    def test_add_months_before_epoch(self) -> None:
        utc = Timezone.utc()
        jan_31_1969 = at(1969, 1, 31).millis
        assert add_months(jan_31_1969, 1, utc) == at(1969, 2, 28).millis

    def test_add_years_zero(self) -> None:
        assert add_years(42, 0, Timezone.utc()) == 42

    def test_add_clock(self) -> None:
        assert add_clock(0, hours=1, minutes=1, seconds=1, milliseconds=1) == 3_661_001

    def test_add_fractional(self) -> None:
        assert add_fractional(0, 2.5, 86400, Timezone.utc()) == 2 * DAY + 12 * HOUR

    def test_apply_fields(self) -> None:
        utc = Timezone.utc()
        start = at(2024, 1, 31).millis
        assert apply_fields(start, utc, months=1, hours=1) == at(2024, 2, 29, 1).millis


class TestHostZoneRollover:
    """Tests for calendar days across a daylight saving change."""

    def test_calendar_day_keeps_wall_time(self, eastern: Timezone) -> None:
        start = Instant(2024, 3, 9, 12, timezone=eastern)
        next_day = start + Duration(days=1)
        assert next_day.fields()[:4] == (2024, 3, 10, 12)
        assert next_day - start == Duration(hours=23)

    def test_elapsed_hours_do_not(self, eastern: Timezone) -> None:
        start = Instant(2024, 3, 9, 12, timezone=eastern)
        assert (start + Duration(hours=24)).fields()[:4] == (2024, 3, 10, 13)

    def test_remove_duration_undoes_apply_duration(self, eastern: Timezone) -> None:
        start = Instant(2024, 3, 9, 1, 30, timezone=eastern).millis
        d = Duration(days=1, hours=1)
        shifted = apply_duration(start, d, eastern)
        assert shifted - start == 25 * HOUR
        assert remove_duration(shifted, d, eastern) == start

    def test_remove_duration_utc(self) -> None:
        utc = Timezone.utc()
        start = at(2024, 1, 31, 23).millis
        d = Duration(days=30, hours=2, milliseconds=5)
        assert remove_duration(apply_duration(start, d, utc), d, utc) == start
