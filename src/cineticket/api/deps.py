"""FastAPI dependencies shared by the API routes."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cineticket.config import settings
from cineticket.database import get_db
from cineticket.services.cinema import CinemaService
from cineticket.store.database import SqlMovieStore, SqlShowStore
from cineticket.store.memory import InMemoryStore
from cineticket.store.models import MovieRecord, ShowRecord

# Used when settings.catalog_backend == "memory"; lives as long as the process
_memory_movies: InMemoryStore[MovieRecord] = InMemoryStore()
_memory_shows: InMemoryStore[ShowRecord] = InMemoryStore()


async def get_memory_service() -> CinemaService:
    return CinemaService(
        _memory_movies,
        _memory_shows,
        max_duration_minutes=settings.max_duration_minutes,
        buffer_minutes=settings.cleaning_buffer_minutes,
    )


async def get_database_service(db: AsyncSession = Depends(get_db)) -> CinemaService:
    return CinemaService(
        SqlMovieStore(db),
        SqlShowStore(db),
        max_duration_minutes=settings.max_duration_minutes,
        buffer_minutes=settings.cleaning_buffer_minutes,
    )


# Resolved once at import; tests override this dependency directly
get_cinema_service = (
    get_memory_service if settings.catalog_backend == "memory" else get_database_service
)
