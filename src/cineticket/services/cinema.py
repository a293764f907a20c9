"""Movie lifecycle and booking operations over the catalog stores."""

import asyncio
import logging

from cineticket.services import ledger
from cineticket.services.errors import MovieDoesNotExist
from cineticket.services.schedule import generate_shows
from cineticket.services.validation import (
    CLEANING_BUFFER_MINUTES,
    MAX_DURATION_MINUTES,
    validate_amounts,
    validate_schedule,
)
from cineticket.store.base import CatalogStore
from cineticket.store.models import MovieRecord, ShowRecord
from cineticket.utils.ids import IdFactory, random_id

logger = logging.getLogger(__name__)

# Shared by every service instance in the process so that concurrent requests
# run their writes one at a time.
_write_lock = asyncio.Lock()


class CinemaService:
    """
    Service for adding, deleting, listing and booking movies and shows.

    Each write operation validates everything before its first store write
    and runs under a process-wide lock, so no other write can observe or
    interleave with a half-finished one.
    """

    def __init__(
        self,
        movies: CatalogStore[MovieRecord],
        shows: CatalogStore[ShowRecord],
        id_factory: IdFactory = random_id,
        *,
        max_duration_minutes: int = MAX_DURATION_MINUTES,
        buffer_minutes: int = CLEANING_BUFFER_MINUTES,
        lock: asyncio.Lock | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            movies: Store for movie records
            shows: Store for show records
            id_factory: Generates ids for new movies and shows
            max_duration_minutes: Longest accepted running time
            buffer_minutes: Cleaning gap between consecutive shows
            lock: Write lock (defaults to the process-wide lock)

        Raises:
            ValueError: A scheduling limit is not positive
        """
        if max_duration_minutes <= 0:
            raise ValueError(f"max_duration_minutes must be positive, got {max_duration_minutes}")
        if buffer_minutes <= 0:
            raise ValueError(f"buffer_minutes must be positive, got {buffer_minutes}")

        self.movies = movies
        self.shows = shows
        self.id_factory = id_factory
        self.max_duration_minutes = max_duration_minutes
        self.buffer_minutes = buffer_minutes
        self.lock = lock or _write_lock

    async def add_movie(
        self,
        name: str,
        price: int,
        duration_minutes: int,
        first_show_time: str,
        show_amount: int,
        seat_amount: int,
    ) -> str:
        """
        Add a movie and generate its shows for the day.

        Returns:
            The new movie's id

        Raises:
            NotPositiveInteger, TimeFormatError, DurationError, ShowAmountError:
                Raised before anything is stored
        """
        validate_amounts(price, seat_amount)
        validate_schedule(
            duration_minutes,
            first_show_time,
            show_amount,
            seat_amount,
            max_duration_minutes=self.max_duration_minutes,
            buffer_minutes=self.buffer_minutes,
        )

        async with self.lock:
            movie_id = self.id_factory()
            shows = generate_shows(
                movie_id,
                first_show_time,
                duration_minutes,
                show_amount,
                seat_amount,
                id_factory=self.id_factory,
                buffer_minutes=self.buffer_minutes,
            )
            movie = MovieRecord(
                id=movie_id,
                name=name,
                price=price,
                duration_minutes=duration_minutes,
                first_show_time=first_show_time,
                show_amount=show_amount,
                seat_amount=seat_amount,
                show_ids=[show.id for show in shows],
            )

            await self.movies.insert(movie.id, movie)
            for show in shows:
                await self.shows.insert(show.id, show)

        logger.info(
            f"Added movie {name!r} ({movie_id}) with {len(shows)} shows "
            f"from {shows[0].start_time} to {shows[-1].end_time}"
        )
        return movie_id

    async def delete_movie(self, movie_id: str) -> str:
        """
        Delete a movie together with all of its shows.

        Raises:
            MovieDoesNotExist: No movie with this id
        """
        async with self.lock:
            movie = await self.movies.get(movie_id, for_update=True)
            if movie is None:
                logger.warning(f"Cannot delete movie {movie_id}: does not exist")
                raise MovieDoesNotExist(movie_id)

            for show_id in movie.show_ids:
                await self.shows.remove(show_id)

            # Catch shows not listed in show_ids (e.g. written by another tool)
            owned_show_ids = set(movie.show_ids)
            for show in await self.shows.values():
                if show.movie_id == movie_id and show.id not in owned_show_ids:
                    await self.shows.remove(show.id)

            await self.movies.remove(movie_id)

        logger.info(f"Deleted movie {movie.name!r} ({movie_id})")
        return movie_id

    async def book_ticket(self, show_id: str, seats: int) -> str:
        """
        Book seats on a show.

        Returns:
            The id of the updated show

        Raises:
            NotPositiveInteger, ScheduleDoesNotExist, NoAvailableSeats
        """
        async with self.lock:
            return await ledger.book(self.shows, show_id, seats)

    async def get_movie_list(self) -> list[MovieRecord]:
        return await self.movies.values()

    async def get_show_list(self, movie_id: str | None = None) -> list[ShowRecord]:
        """List all shows, or only those of one movie."""
        shows = await self.shows.values()
        if movie_id is not None:
            shows = [show for show in shows if show.movie_id == movie_id]
        return shows

    async def get_movie_details(self, movie_id: str) -> MovieRecord | None:
        return await self.movies.get(movie_id)

    async def get_show_details(self, show_id: str) -> ShowRecord | None:
        return await self.shows.get(show_id)
