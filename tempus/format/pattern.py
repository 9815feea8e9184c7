"""Pattern-based formatting and parsing.

Patterns use letter runs in the style of java.text.SimpleDateFormat. A
run of one letter is a field, its length sets the minimum width. Text
inside single quotes is literal, ``''`` is a literal quote, and every
character that is not an ASCII letter is literal.

Supported Letters:
    y - Year (yyyy: at least four digits, yy: two digits)
    M - Month (MM: 01-12, M: 1-12)
    d - Day of month (dd: 01-31)
    H - Hour, 24-hour (HH: 00-23)
    m - Minute (mm: 00-59)
    s - Second (ss: 00-59)
    S - Millisecond (SSS: 000-999)

Not Supported (locale or zone dependent):
    E - Weekday names
    a - AM/PM marker
    z, Z, X - Zone names and offsets

Functions:
    format_pattern: Render calendar fields with a pattern.
    parse_pattern: Parse text into calendar fields with a pattern.

Examples:
    >>> format_pattern((2024, 1, 15, 14, 30, 45, 7), "yyyy-MM-dd HH:mm:ss.SSS")
    '2024-01-15 14:30:45.007'

    >>> parse_pattern("2024-01-15 14:30:45", "yyyy-MM-dd HH:mm:ss")
    (2024, 1, 15, 14, 30, 45, 0)
"""

from __future__ import annotations

import logging
import re
from typing import Union

from tempus._internal.calendar import Fields
from tempus._internal.constants import PATTERN_CACHE_SIZE
from tempus._internal.decorators import memoize
from tempus._internal.validation import check_fields
from tempus.errors import ParseError

logger = logging.getLogger(__name__)

# Field name and position in a Fields tuple for each pattern letter
_LETTERS: dict[str, tuple[str, int]] = {
    "y": ("year", 0),
    "M": ("month", 1),
    "d": ("day", 2),
    "H": ("hour", 3),
    "m": ("minute", 4),
    "s": ("second", 5),
    "S": ("millisecond", 6),
}

# Two-digit years parse into 2000-2099
_TWO_DIGIT_YEAR_BASE = 2000

# ("literal", text) or ("field", letter, width)
Token = Union[tuple[str, str], tuple[str, str, int]]


@memoize(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> tuple[Token, ...]:
    """Split a pattern into literal and field tokens.

    Raises:
        ValueError: If the pattern uses an unsupported letter or has an
            unterminated quote.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = pattern.find("'", i + 1)
            while end != -1 and end + 1 < n and pattern[end + 1] == "'":
                end = pattern.find("'", end + 2)
            if end == -1:
                raise ValueError(f"unterminated quote in pattern {pattern!r}")
            literal.append(pattern[i + 1 : end].replace("''", "'"))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            if ch not in _LETTERS:
                raise ValueError(
                    f"unsupported pattern letter {ch!r} in {pattern!r}. "
                    f"Supported: {', '.join(_LETTERS)}"
                )
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            if literal:
                tokens.append(("literal", "".join(literal)))
                literal = []
            tokens.append(("field", ch, j - i))
            i = j
        else:
            literal.append(ch)
            i += 1

    if literal:
        tokens.append(("literal", "".join(literal)))

    logger.debug("compiled pattern %r into %d tokens", pattern, len(tokens))
    return tuple(tokens)


def _format_field(letter: str, width: int, value: int) -> str:
    if letter == "y" and width == 2:
        return f"{value % 100:02d}"
    if value < 0:
        return f"-{-value:0{width}d}"
    return f"{value:0{width}d}"


def format_pattern(fields: Fields, pattern: str) -> str:
    """Render calendar fields with a pattern.

    Args:
        fields: (year, month, day, hour, minute, second, millisecond).
        pattern: Pattern string, e.g. "yyyy-MM-dd HH:mm:ss".

    Returns:
        Formatted string.

    Raises:
        ValueError: If the pattern is invalid.

    Examples:
        >>> format_pattern((2024, 3, 5, 9, 0, 0, 0), "dd/MM/yyyy 'at' HH:mm")
        '05/03/2024 at 09:00'
    """
    result = []
    for token in compile_pattern(pattern):
        if token[0] == "literal":
            result.append(token[1])
        else:
            _, letter, width = token
            result.append(_format_field(letter, width, fields[_LETTERS[letter][1]]))
    return "".join(result)


def _field_regex(letter: str, width: int) -> str:
    name = _LETTERS[letter][0]
    if letter == "y":
        if width == 2:
            return rf"(?P<{name}>\d{{2}})"
        # Non-greedy so "yyyyMMdd" still leaves digits for the month
        return rf"(?P<{name}>-?\d{{{width},}}?)"
    if width == 1:
        return rf"(?P<{name}>\d{{1,{3 if letter == 'S' else 2}}})"
    return rf"(?P<{name}>\d{{{width}}})"


@memoize(maxsize=PATTERN_CACHE_SIZE)
def _pattern_regex(pattern: str) -> tuple[re.Pattern[str], bool]:
    """Return the compiled regex and whether the year is two-digit."""
    parts = []
    seen: set[str] = set()
    two_digit_year = False
    for token in compile_pattern(pattern):
        if token[0] == "literal":
            parts.append(re.escape(token[1]))
            continue
        _, letter, width = token
        if letter in seen:
            raise ValueError(f"pattern {pattern!r} repeats the {_LETTERS[letter][0]} field")
        seen.add(letter)
        if letter == "y":
            two_digit_year = width == 2
        parts.append(_field_regex(letter, width))
    return re.compile("^" + "".join(parts) + "$"), two_digit_year


def parse_pattern(text: str, pattern: str) -> Fields:
    """Parse text into calendar fields using a pattern.

    Year, month and day are required; missing time fields default to 0.
    The parsed fields are validated like constructor arguments.

    Args:
        text: The string to parse.
        pattern: Pattern string the text was written with.

    Returns:
        (year, month, day, hour, minute, second, millisecond).

    Raises:
        ParseError: If the text does not match or a date field is missing.
        RangeError: If a parsed field is out of range.
        ValueError: If the pattern is invalid.

    Examples:
        >>> parse_pattern("15.01.2024", "dd.MM.yyyy")
        (2024, 1, 15, 0, 0, 0, 0)
    """
    regex, two_digit_year = _pattern_regex(pattern)
    match = regex.match(text)
    if not match:
        raise ParseError(f"string {text!r} does not match pattern {pattern!r}")

    groups = match.groupdict()
    missing = [name for name in ("year", "month", "day") if groups.get(name) is None]
    if missing:
        raise ParseError(
            f"pattern {pattern!r} must contain year, month and day; "
            f"missing: {', '.join(missing)}"
        )

    year = int(groups["year"])
    if two_digit_year:
        year += _TWO_DIGIT_YEAR_BASE

    fields = (
        year,
        int(groups["month"]),
        int(groups["day"]),
        int(groups.get("hour") or 0),
        int(groups.get("minute") or 0),
        int(groups.get("second") or 0),
        int(groups.get("millisecond") or 0),
    )
    check_fields(*fields)
    return fields


__all__ = ["compile_pattern", "format_pattern", "parse_pattern"]
