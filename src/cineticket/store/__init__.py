"""Catalog stores for movies and shows."""

from cineticket.store.base import CatalogStore
from cineticket.store.memory import InMemoryStore
from cineticket.store.models import MovieRecord, ShowRecord

__all__ = ["CatalogStore", "InMemoryStore", "MovieRecord", "ShowRecord"]
