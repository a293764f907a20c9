"""Seed script to populate a day's programme of sample movies."""

import asyncio

from cineticket.database import session_scope
from cineticket.services.cinema import CinemaService
from cineticket.store.database import SqlMovieStore, SqlShowStore

SAMPLE_MOVIES = [
    {
        "name": "Inception",
        "price": 1000,
        "duration_minutes": 150,
        "first_show_time": "10:00",
        "show_amount": 3,
        "seat_amount": 50,
    },
    {
        "name": "Spirited Away",
        "price": 800,
        "duration_minutes": 125,
        "first_show_time": "11:30",
        "show_amount": 4,
        "seat_amount": 80,
    },
    {
        "name": "Seven Samurai",
        "price": 1200,
        "duration_minutes": 207,
        "first_show_time": "14:00",
        "show_amount": 2,
        "seat_amount": 40,
    },
]


async def seed_movies(service: CinemaService, movies: list[dict] | None = None) -> list[str]:
    """
    Add sample movies, skipping names that already exist.

    Returns:
        Ids of the movies that were added
    """
    existing_names = {movie.name for movie in await service.get_movie_list()}

    added: list[str] = []
    for movie_data in movies if movies is not None else SAMPLE_MOVIES:
        if movie_data["name"] in existing_names:
            print(f"Movie {movie_data['name']!r} already exists, skipping")
            continue

        movie_id = await service.add_movie(**movie_data)
        added.append(movie_id)
        print(f"Added movie: {movie_data['name']} ({movie_id})")

    return added


async def main() -> None:
    async with session_scope() as session:
        service = CinemaService(SqlMovieStore(session), SqlShowStore(session))
        added = await seed_movies(service)
    print(f"Movie seeding complete: {len(added)} added")


if __name__ == "__main__":
    asyncio.run(main())
