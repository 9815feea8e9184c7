"""Pattern formatting and parsing.

This module converts calendar fields to and from text using
SimpleDateFormat-style patterns such as "yyyy-MM-dd HH:mm:ss".

Functions:
    format_pattern: Render calendar fields with a pattern.
    parse_pattern: Parse text into calendar fields with a pattern.

Examples:
    >>> from tempus.format import format_pattern
    >>> format_pattern((2024, 1, 15, 14, 30, 45, 0), "yyyy/MM/dd HH:mm")
    '2024/01/15 14:30'
"""

from __future__ import annotations

from tempus.format.pattern import format_pattern, parse_pattern

__all__: list[str] = [
    "format_pattern",
    "parse_pattern",
]
