"""Tests for pattern formatting and parsing."""

from __future__ import annotations

import pytest

from tempus.errors import ParseError, RangeError
from tempus.format import format_pattern, parse_pattern

FIELDS = (2024, 1, 15, 14, 30, 45, 7)


class TestFormatPattern:
    """Tests for format_pattern."""

    def test_default_pattern(self) -> None:
        assert format_pattern(FIELDS, "yyyy-MM-dd HH:mm:ss") == "2024-01-15 14:30:45"

    def test_milliseconds(self) -> None:
        assert format_pattern(FIELDS, "HH:mm:ss.SSS") == "14:30:45.007"

    def test_single_letter_fields_are_unpadded(self) -> None:
        assert format_pattern((2024, 3, 5, 9, 7, 0, 0), "M/d/yyyy H:m") == "3/5/2024 9:7"

    def test_two_digit_year(self) -> None:
        assert format_pattern((2009, 1, 1, 0, 0, 0, 0), "yy") == "09"

    def test_negative_year(self) -> None:
        assert format_pattern((-44, 3, 15, 0, 0, 0, 0), "yyyy-MM-dd") == "-0044-03-15"

    def test_quoted_literal(self) -> None:
        assert format_pattern(FIELDS, "yyyy-MM-dd'T'HH:mm:ss") == "2024-01-15T14:30:45"

    def test_escaped_quote(self) -> None:
        assert format_pattern(FIELDS, "HH 'o''clock'") == "14 o'clock"
        assert format_pattern(FIELDS, "''HH''") == "'14'"

    def test_non_letters_are_literal(self) -> None:
        assert format_pattern(FIELDS, "[dd.MM]") == "[15.01]"

    def test_unsupported_letter(self) -> None:
        with pytest.raises(ValueError, match="unsupported pattern letter 'E'"):
            format_pattern(FIELDS, "EEE, dd MMM")

    def test_unterminated_quote(self) -> None:
        with pytest.raises(ValueError, match="unterminated quote"):
            format_pattern(FIELDS, "yyyy 'at")


class TestParsePattern:
    """Tests for parse_pattern."""

    def test_default_pattern(self) -> None:
        assert parse_pattern("2024-01-15 14:30:45", "yyyy-MM-dd HH:mm:ss") == (
            2024, 1, 15, 14, 30, 45, 0,
        )

    def test_date_only(self) -> None:
        assert parse_pattern("15.01.2024", "dd.MM.yyyy") == (2024, 1, 15, 0, 0, 0, 0)

    def test_adjacent_numeric_fields(self) -> None:
        assert parse_pattern("20240115", "yyyyMMdd") == (2024, 1, 15, 0, 0, 0, 0)

    def test_milliseconds(self) -> None:
        assert parse_pattern("2024-01-15 14:30:45.123", "yyyy-MM-dd HH:mm:ss.SSS") == (
            2024, 1, 15, 14, 30, 45, 123,
        )

    def test_single_letter_fields(self) -> None:
        assert parse_pattern("3/5/2024", "M/d/yyyy") == (2024, 3, 5, 0, 0, 0, 0)
        assert parse_pattern("12/25/2024", "M/d/yyyy") == (2024, 12, 25, 0, 0, 0, 0)

    def test_two_digit_year(self) -> None:
        assert parse_pattern("24-01-15", "yy-MM-dd") == (2024, 1, 15, 0, 0, 0, 0)

    def test_quoted_literal(self) -> None:
        assert parse_pattern("2024-01-15T14:30:45", "yyyy-MM-dd'T'HH:mm:ss") == (
            2024, 1, 15, 14, 30, 45, 0,
        )

    def test_mismatch(self) -> None:
        with pytest.raises(ParseError, match="does not match"):
            parse_pattern("2024/01/15", "yyyy-MM-dd")

    def test_trailing_text(self) -> None:
        with pytest.raises(ParseError):
            parse_pattern("2024-01-15 extra", "yyyy-MM-dd")

    def test_missing_date_field(self) -> None:
        with pytest.raises(ParseError, match="missing: day"):
            parse_pattern("2024-01", "yyyy-MM")

    def test_out_of_range_field(self) -> None:
        with pytest.raises(RangeError) as exc_info:
            parse_pattern("2023-02-29", "yyyy-MM-dd")
        assert exc_info.value.field == "day"

    def test_repeated_field(self) -> None:
        with pytest.raises(ValueError, match="repeats the year field"):
            parse_pattern("2024 2024-01-01", "yyyy yyyy-MM-dd")

    def test_format_then_parse_all_fields(self) -> None:
        pattern = "yyyy-MM-dd HH:mm:ss.SSS"
        text = format_pattern((2024, 2, 29, 23, 59, 59, 999), pattern)
        assert parse_pattern(text, pattern) == (2024, 2, 29, 23, 59, 59, 999)


class TestPatternCache:
    """Tests for compiled pattern caching."""

    def test_compiled_pattern_is_reused(self) -> None:
        from tempus.format.pattern import compile_pattern

        assert compile_pattern("yyyy-MM-dd") is compile_pattern("yyyy-MM-dd")
        assert ("yyyy-MM-dd",) in {key[0] for key in compile_pattern._cache}  # type: ignore[attr-defined]

    def test_cache_is_bounded(self) -> None:
        from tempus._internal.constants import PATTERN_CACHE_SIZE
        from tempus.format.pattern import compile_pattern

        for i in range(PATTERN_CACHE_SIZE + 10):
            compile_pattern(f"yyyy'{i}'")
        assert len(compile_pattern._cache) == PATTERN_CACHE_SIZE  # type: ignore[attr-defined]

    def test_oldest_entry_is_evicted(self) -> None:
        from tempus._internal.decorators import memoize

        calls: list[int] = []

        @memoize(maxsize=2)
        def square(n: int) -> int:
            calls.append(n)
            return n * n

        assert [square(1), square(2), square(3)] == [1, 4, 9]
        assert square(3) == 9
        assert square(1) == 1
        assert calls == [1, 2, 3, 1]

    def test_maxsize_must_be_positive(self) -> None:
        from tempus._internal.decorators import memoize

        with pytest.raises(ValueError, match="maxsize"):
            memoize(maxsize=0)
