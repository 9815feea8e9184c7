"""Tempus exception hierarchy.

All Tempus-specific exceptions inherit from TempusError.
"""

from __future__ import annotations


class TempusError(Exception):
    """Base exception for all Tempus errors."""

    pass


class ValidationError(TempusError):
    """Invalid input values.

    Raised when a value handed to a constructor cannot describe an instant.

    Examples:
        - A calendar field outside its range (see RangeError)
        - A timestamp that is neither 10 nor 13 digits long
    """

    pass


class RangeError(ValidationError):
    """A single calendar field is outside its valid range.

    Attributes:
        field: Name of the offending field ("month", "day", ...).
        minimum: Smallest accepted value (inclusive).
        maximum: Largest accepted value (inclusive).
        value: The rejected value.
    """

    def __init__(self, field: str, minimum: int, maximum: int, value: int) -> None:
        self.field = field
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        super().__init__(
            f"{field} must be between {minimum} and {maximum}, got {value}"
        )


class ParseError(TempusError):
    """Failed to parse string representation.

    Raised when text does not match the pattern it is parsed with.

    Examples:
        - "2024/01/15" parsed with "yyyy-MM-dd"
        - A pattern without year, month and day tokens
    """

    pass


class TimezoneError(TempusError):
    """Invalid timezone.

    Raised when a fixed UTC offset is malformed or out of range.
    """

    pass


__all__ = [
    "TempusError",
    "ValidationError",
    "RangeError",
    "ParseError",
    "TimezoneError",
]
