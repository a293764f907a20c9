"""Unit tests for CinemaService lifecycle and booking operations."""

import asyncio

import pytest

from cineticket.services.cinema import CinemaService
from cineticket.services.errors import (
    DurationError,
    MovieDoesNotExist,
    NoAvailableSeats,
    NotPositiveInteger,
    ScheduleDoesNotExist,
    ShowAmountError,
    TimeFormatError,
)
from cineticket.store.memory import InMemoryStore
from cineticket.store.models import ShowRecord
from cineticket.utils.ids import sequential_ids


class SlowShowStore(InMemoryStore[ShowRecord]):
    """Yields to the event loop on every read, so unguarded writes could interleave."""

    async def get(self, key: str, *, for_update: bool = False) -> ShowRecord | None:
        value = await super().get(key, for_update=for_update)
        await asyncio.sleep(0)
        return value


async def add_inception(service: CinemaService) -> str:
    return await service.add_movie("Inception", 1000, 150, "10:00", 3, 50)


# ---------------------------------------------------------------------------
# add_movie
# ---------------------------------------------------------------------------


class TestAddMovie:
    async def test_creates_movie_and_its_shows(self, service: CinemaService) -> None:
        movie_id = await add_inception(service)

        assert movie_id == "id-1"
        movie = await service.get_movie_details(movie_id)
        assert movie is not None
        assert movie.name == "Inception"
        assert movie.price == 1000
        assert movie.show_ids == ["id-2", "id-3", "id-4"]

        shows = await service.get_show_list()
        assert [(s.start_time, s.end_time) for s in shows] == [
            ("10:00", "12:30"),
            ("13:00", "15:30"),
            ("16:00", "18:30"),
        ]
        assert all(s.available_seats == 50 and s.movie_id == movie_id for s in shows)

    async def test_duration_error_stores_nothing(self, service: CinemaService) -> None:
        with pytest.raises(DurationError):
            await service.add_movie("X", 100, 800, "10:00", 1, 10)

        assert await service.get_movie_list() == []
        assert await service.get_show_list() == []

    async def test_show_amount_error_stores_nothing(self, service: CinemaService) -> None:
        with pytest.raises(ShowAmountError):
            await service.add_movie("X", 100, 150, "10:00", 5, 10)

        assert await service.get_movie_list() == []
        assert await service.get_show_list() == []

    async def test_time_format_error(self, service: CinemaService) -> None:
        with pytest.raises(TimeFormatError):
            await service.add_movie("X", 100, 90, "7pm", 1, 10)

    async def test_negative_price_stores_nothing(self, service: CinemaService) -> None:
        with pytest.raises(NotPositiveInteger, match="price"):
            await service.add_movie("X", -1, 150, "10:00", 1, 10)

        assert await service.get_movie_list() == []
        assert await service.get_show_list() == []

    async def test_seat_amount_too_large_to_store(self, service: CinemaService) -> None:
        with pytest.raises(NotPositiveInteger, match="seat_amount"):
            await service.add_movie("X", 100, 150, "10:00", 1, 3_000_000_000)

        assert await service.get_show_list() == []

    def test_rejects_non_positive_buffer(self) -> None:
        with pytest.raises(ValueError, match="buffer_minutes"):
            CinemaService(InMemoryStore(), InMemoryStore(), buffer_minutes=0)

    def test_rejects_non_positive_max_duration(self) -> None:
        with pytest.raises(ValueError, match="max_duration_minutes"):
            CinemaService(InMemoryStore(), InMemoryStore(), max_duration_minutes=0)

    async def test_uses_configured_limits(self) -> None:
        service = CinemaService(
            InMemoryStore(),
            InMemoryStore(),
            id_factory=sequential_ids("id"),
            max_duration_minutes=180,
            buffer_minutes=15,
            lock=asyncio.Lock(),
        )

        with pytest.raises(DurationError):
            await service.add_movie("Long", 100, 200, "10:00", 1, 10)

        movie_id = await service.add_movie("Short", 100, 60, "10:00", 2, 10)
        shows = await service.get_show_list(movie_id=movie_id)
        assert [s.start_time for s in shows] == ["10:00", "11:15"]


# ---------------------------------------------------------------------------
# delete_movie
# ---------------------------------------------------------------------------


class TestDeleteMovie:
    async def test_removes_movie_and_its_shows(self, service: CinemaService) -> None:
        movie_id = await add_inception(service)
        movie = await service.get_movie_details(movie_id)
        assert movie is not None

        assert await service.delete_movie(movie_id) == movie_id

        assert await service.get_movie_details(movie_id) is None
        for show_id in movie.show_ids:
            assert await service.get_show_details(show_id) is None

    async def test_keeps_other_movies(self, service: CinemaService) -> None:
        inception = await add_inception(service)
        tenet = await service.add_movie("Tenet", 900, 150, "11:00", 2, 30)

        await service.delete_movie(inception)

        assert [m.id for m in await service.get_movie_list()] == [tenet]
        shows = await service.get_show_list()
        assert len(shows) == 2
        assert all(s.movie_id == tenet for s in shows)

    async def test_also_removes_unlisted_shows_of_the_movie(self, service: CinemaService) -> None:
        movie_id = await add_inception(service)
        stray = ShowRecord(
            id="stray",
            movie_id=movie_id,
            start_time="20:00",
            end_time="22:30",
            available_seats=50,
        )
        await service.shows.insert(stray.id, stray)

        await service.delete_movie(movie_id)

        assert await service.get_show_list() == []

    async def test_unknown_movie(self, service: CinemaService) -> None:
        with pytest.raises(MovieDoesNotExist) as exc_info:
            await service.delete_movie("missing")

        assert exc_info.value.movie_id == "missing"
        assert exc_info.value.to_dict() == {
            "error": "MovieDoesNotExist",
            "detail": "Movie missing does not exist",
            "movie_id": "missing",
        }


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


class TestReads:
    async def test_lists_start_empty(self, service: CinemaService) -> None:
        assert await service.get_movie_list() == []
        assert await service.get_show_list() == []

    async def test_show_list_filtered_by_movie(self, service: CinemaService) -> None:
        inception = await add_inception(service)
        tenet = await service.add_movie("Tenet", 900, 150, "11:00", 2, 30)

        assert len(await service.get_show_list(movie_id=inception)) == 3
        assert len(await service.get_show_list(movie_id=tenet)) == 2
        assert await service.get_show_list(movie_id="missing") == []

    async def test_details_return_none_for_unknown_ids(self, service: CinemaService) -> None:
        assert await service.get_movie_details("missing") is None
        assert await service.get_show_details("missing") is None


# ---------------------------------------------------------------------------
# book_ticket
# ---------------------------------------------------------------------------


class TestBookTicket:
    async def test_books_seats(self, service: CinemaService) -> None:
        await add_inception(service)

        assert await service.book_ticket("id-2", 10) == "id-2"

        show = await service.get_show_details("id-2")
        assert show is not None
        assert show.available_seats == 40

    async def test_booking_only_affects_one_show(self, service: CinemaService) -> None:
        await add_inception(service)
        await service.book_ticket("id-2", 10)

        show = await service.get_show_details("id-3")
        assert show is not None
        assert show.available_seats == 50

    async def test_overbooking(self, service: CinemaService) -> None:
        await add_inception(service)

        with pytest.raises(NoAvailableSeats):
            await service.book_ticket("id-2", 60)

        await service.book_ticket("id-2", 50)
        with pytest.raises(NoAvailableSeats):
            await service.book_ticket("id-2", 1)

    async def test_unknown_show(self, service: CinemaService) -> None:
        with pytest.raises(ScheduleDoesNotExist):
            await service.book_ticket("missing", 1)

    async def test_concurrent_bookings_never_oversell(self) -> None:
        service = CinemaService(
            InMemoryStore(),
            SlowShowStore(),
            id_factory=sequential_ids("id"),
            lock=asyncio.Lock(),
        )
        await add_inception(service)

        results = await asyncio.gather(
            *[service.book_ticket("id-2", 10) for _ in range(8)],
            return_exceptions=True,
        )

        assert results.count("id-2") == 5
        assert sum(isinstance(r, NoAvailableSeats) for r in results) == 3
        show = await service.get_show_details("id-2")
        assert show is not None
        assert show.available_seats == 0
