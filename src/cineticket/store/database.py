"""Catalog stores persisted in the movies and shows tables."""

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cineticket.models import Movie, Show
from cineticket.store.base import CatalogStore
from cineticket.store.models import MovieRecord, ShowRecord


def movie_to_record(movie: Movie) -> MovieRecord:
    """Convert a Movie row (with shows loaded) to a MovieRecord."""
    return MovieRecord(
        id=movie.id,
        name=movie.name,
        price=movie.price,
        duration_minutes=movie.duration_minutes,
        first_show_time=movie.first_show_time,
        show_amount=movie.show_amount,
        seat_amount=movie.seat_amount,
        show_ids=[show.id for show in movie.shows],
    )


def show_to_record(show: Show) -> ShowRecord:
    """Convert a Show row to a ShowRecord."""
    return ShowRecord(
        id=show.id,
        movie_id=show.movie_id,
        start_time=show.start_time,
        end_time=show.end_time,
        available_seats=show.available_seats,
        valid=show.valid,
    )


class SqlMovieStore(CatalogStore[MovieRecord]):
    """
    Movie store over an async SQLAlchemy session.

    show_ids is derived from the shows table on read and ignored on write;
    shows are attached by inserting them into a SqlShowStore.
    Writes are flushed immediately but only committed with the session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _select(self) -> Select:
        # populate_existing refreshes rows (and show_ids) already in the session
        return (
            select(Movie)
            .options(selectinload(Movie.shows))
            .execution_options(populate_existing=True)
        )

    async def insert(self, key: str, value: MovieRecord) -> None:
        movie = await self.db.get(Movie, key)
        if movie is None:
            movie = Movie(id=key)
            self.db.add(movie)

        movie.name = value.name
        movie.price = value.price
        movie.duration_minutes = value.duration_minutes
        movie.first_show_time = value.first_show_time
        movie.show_amount = value.show_amount
        movie.seat_amount = value.seat_amount
        await self.db.flush()

    async def get(self, key: str, *, for_update: bool = False) -> MovieRecord | None:
        stmt = self._select().where(Movie.id == key)
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.db.execute(stmt)
        movie = result.scalar_one_or_none()
        return movie_to_record(movie) if movie else None

    async def remove(self, key: str) -> None:
        # Remaining shows go with it through ON DELETE CASCADE
        await self.db.execute(delete(Movie).where(Movie.id == key))

    async def values(self) -> list[MovieRecord]:
        result = await self.db.execute(self._select().order_by(Movie.id))
        return [movie_to_record(movie) for movie in result.scalars().all()]


class SqlShowStore(CatalogStore[ShowRecord]):
    """Show store over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _select(self) -> Select:
        return select(Show).execution_options(populate_existing=True)

    async def insert(self, key: str, value: ShowRecord) -> None:
        show = await self.db.get(Show, key)
        if show is None:
            show = Show(id=key)
            self.db.add(show)

        show.movie_id = value.movie_id
        show.start_time = value.start_time
        show.end_time = value.end_time
        show.available_seats = value.available_seats
        show.valid = value.valid
        await self.db.flush()

    async def get(self, key: str, *, for_update: bool = False) -> ShowRecord | None:
        stmt = self._select().where(Show.id == key)
        if for_update:
            # Row lock lasts until the request transaction commits
            stmt = stmt.with_for_update()

        result = await self.db.execute(stmt)
        show = result.scalar_one_or_none()
        return show_to_record(show) if show else None

    async def remove(self, key: str) -> None:
        await self.db.execute(delete(Show).where(Show.id == key))

    async def values(self) -> list[ShowRecord]:
        result = await self.db.execute(self._select().order_by(Show.movie_id, Show.start_time))
        return [show_to_record(show) for show in result.scalars().all()]
