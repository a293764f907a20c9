"""Conversion between "HH:mm" strings and minutes since midnight."""

import re

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


class InvalidTimeFormat(ValueError):
    """Raised when a string is not a valid 24-hour "HH:mm" time."""


def parse_time(text: str) -> int:
    """
    Parse a 24-hour "HH:mm" time of day.

    Both fields must be exactly two digits: "09:05" is accepted,
    "9:05", "24:00" and "12:60" are not.

    Args:
        text: Time of day, e.g. "18:30"

    Returns:
        Minutes since midnight (0-1439)

    Raises:
        InvalidTimeFormat: If text is not a valid "HH:mm" time
    """
    match = _TIME_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidTimeFormat(f"Invalid time {text!r}, expected HH:mm")

    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes)


def format_time(minutes: int) -> str:
    """
    Format minutes since midnight as a zero-padded "HH:mm" string.

    Example:
        >>> format_time(545)
        '09:05'
    """
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"{minutes} is outside a single day (0-{MINUTES_PER_DAY - 1})")

    return f"{minutes // 60:02d}:{minutes % 60:02d}"
