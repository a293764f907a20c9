"""Seat booking against a single show."""

import logging

from cineticket.services.errors import NoAvailableSeats, NotPositiveInteger, ScheduleDoesNotExist
from cineticket.store.base import CatalogStore
from cineticket.store.models import ShowRecord

logger = logging.getLogger(__name__)


async def book(shows: CatalogStore[ShowRecord], show_id: str, seats: int) -> str:
    """
    Take seats from a show's inventory.

    The caller must make the read and the write atomic with respect to other
    bookings (CinemaService holds its write lock; SQL stores also lock the row).

    Args:
        shows: Store holding the show
        show_id: Show to book
        seats: Number of seats to take

    Returns:
        The id of the updated show

    Raises:
        NotPositiveInteger: seats is zero or negative
        ScheduleDoesNotExist: No show with this id
        NoAvailableSeats: Fewer than seats remain; the show is left unchanged
    """
    if seats <= 0:
        raise NotPositiveInteger(f"seats must be a positive integer, got {seats}")

    show = await shows.get(show_id, for_update=True)
    if show is None:
        logger.warning(f"Booking rejected: show {show_id} does not exist")
        raise ScheduleDoesNotExist(show_id)

    if seats > show.available_seats:
        logger.warning(
            f"Booking rejected: {seats} seats requested for show {show_id}, "
            f"{show.available_seats} available"
        )
        raise NoAvailableSeats(
            f"Not enough available seats: {seats} requested, {show.available_seats} available"
        )

    show.available_seats -= seats
    await shows.insert(show.id, show)

    logger.info(f"Booked {seats} seats for show {show_id} ({show.available_seats} left)")
    return show.id
