"""Validation rules for a movie's daily show schedule."""

from cineticket.services.errors import (
    DurationError,
    NotPositiveInteger,
    ShowAmountError,
    TimeFormatError,
)
from cineticket.utils.timeofday import MINUTES_PER_DAY, InvalidTimeFormat, parse_time

MAX_DURATION_MINUTES = 720
CLEANING_BUFFER_MINUTES = 30

# Integer columns in the movies and shows tables are 32-bit
MAX_STORED_INTEGER = 2**31 - 1


def validate_amounts(price: int, seat_amount: int) -> None:
    """
    Check the stored amounts that the schedule rules leave unbounded.

    Raises:
        NotPositiveInteger: price is negative, or either value does not fit
            a stored integer
    """
    if price < 0:
        raise NotPositiveInteger(f"price must be a non-negative integer, got {price}")

    for field_name, value in (("price", price), ("seat_amount", seat_amount)):
        if value > MAX_STORED_INTEGER:
            raise NotPositiveInteger(
                f"{field_name} must be at most {MAX_STORED_INTEGER}, got {value}"
            )


def max_shows_per_day(
    first_show_minutes: int,
    duration_minutes: int,
    buffer_minutes: int = CLEANING_BUFFER_MINUTES,
) -> int:
    """Number of shows (each followed by a cleaning buffer) that fit before midnight."""
    return (MINUTES_PER_DAY - first_show_minutes) // (duration_minutes + buffer_minutes)


def validate_schedule(
    duration_minutes: int,
    first_show_time: str,
    show_amount: int,
    seat_amount: int,
    *,
    max_duration_minutes: int = MAX_DURATION_MINUTES,
    buffer_minutes: int = CLEANING_BUFFER_MINUTES,
) -> int:
    """
    Check that a movie's schedule parameters describe a feasible day.

    Checks run in a fixed order and the first failure is raised:
    positive integers, time format, duration ceiling, show count.

    Args:
        duration_minutes: Running time of the movie
        first_show_time: Start of the first show, "HH:mm"
        show_amount: Number of shows requested for the day
        seat_amount: Seats available in each show
        max_duration_minutes: Longest accepted running time
        buffer_minutes: Cleaning gap between consecutive shows

    Returns:
        The first show time in minutes since midnight

    Raises:
        NotPositiveInteger, TimeFormatError, DurationError, ShowAmountError
    """
    for field_name, value in (
        ("duration_minutes", duration_minutes),
        ("show_amount", show_amount),
        ("seat_amount", seat_amount),
    ):
        if value <= 0:
            raise NotPositiveInteger(f"{field_name} must be a positive integer, got {value}")

    try:
        first_show_minutes = parse_time(first_show_time)
    except InvalidTimeFormat as e:
        raise TimeFormatError(str(e)) from e

    if duration_minutes > max_duration_minutes:
        raise DurationError(
            f"Duration of {duration_minutes} minutes exceeds the maximum of "
            f"{max_duration_minutes} minutes"
        )

    max_shows = max_shows_per_day(first_show_minutes, duration_minutes, buffer_minutes)
    if show_amount > max_shows:
        raise ShowAmountError(
            f"Only {max_shows} shows of {duration_minutes} minutes fit between "
            f"{first_show_time} and midnight, {show_amount} requested",
            max_shows=max_shows,
        )

    return first_show_minutes
