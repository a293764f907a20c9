"""Shared test fixtures."""

import asyncio

import pytest
from fastapi import FastAPI

from cineticket.api.deps import get_cinema_service
from cineticket.api.errors import register_exception_handlers
from cineticket.api.routes import health, movies, shows
from cineticket.services.cinema import CinemaService
from cineticket.store.memory import InMemoryStore
from cineticket.utils.ids import sequential_ids


@pytest.fixture
def service() -> CinemaService:
    """In-memory service with predictable ids ("id-1", "id-2", ...) and its own lock."""
    return CinemaService(
        InMemoryStore(),
        InMemoryStore(),
        id_factory=sequential_ids("id"),
        lock=asyncio.Lock(),
    )


@pytest.fixture
def test_app(service: CinemaService) -> FastAPI:
    """Minimal FastAPI app wired to the in-memory service, for API tests."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    app.include_router(shows.router, prefix="/api")
    app.dependency_overrides[get_cinema_service] = lambda: service
    return app
