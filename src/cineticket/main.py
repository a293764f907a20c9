"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cineticket.api.errors import register_exception_handlers
from cineticket.api.routes import health, movies, shows
from cineticket.config import settings
from cineticket.database import engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"CineTicket API starting with {settings.catalog_backend!r} catalog backend")

    yield

    # Shutdown: close pooled database connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="CineTicket API",
    description="Movie schedules and seat booking for a single cinema",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(shows.router, prefix="/api", tags=["shows"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("cineticket.main:app", host=settings.api_host, port=settings.api_port)
