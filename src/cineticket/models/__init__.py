"""SQLAlchemy ORM models."""

from cineticket.models.base import Base
from cineticket.models.movie import Movie
from cineticket.models.show import Show

__all__ = ["Base", "Movie", "Show"]
