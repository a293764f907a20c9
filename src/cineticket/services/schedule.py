"""Generation of a movie's shows for one day."""

from cineticket.services.validation import CLEANING_BUFFER_MINUTES
from cineticket.store.models import ShowRecord
from cineticket.utils.ids import IdFactory, random_id
from cineticket.utils.timeofday import format_time, parse_time


def generate_shows(
    movie_id: str,
    first_show_time: str,
    duration_minutes: int,
    show_amount: int,
    seat_amount: int,
    id_factory: IdFactory = random_id,
    buffer_minutes: int = CLEANING_BUFFER_MINUTES,
) -> list[ShowRecord]:
    """
    Lay out show_amount back-to-back shows starting at first_show_time.

    Consecutive shows are separated by the cleaning buffer. Inputs must
    already have passed validate_schedule(); nothing is re-checked here.

    Example:
        150-minute movie, first show "10:00", 3 shows:
        10:00-12:30, 13:00-15:30, 16:00-18:30
    """
    first_show_minutes = parse_time(first_show_time)
    interval = duration_minutes + buffer_minutes

    shows: list[ShowRecord] = []
    for i in range(show_amount):
        start = first_show_minutes + i * interval
        shows.append(
            ShowRecord(
                id=id_factory(),
                movie_id=movie_id,
                start_time=format_time(start),
                end_time=format_time(start + duration_minutes),
                available_seats=seat_amount,
            )
        )

    return shows
