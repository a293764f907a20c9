"""Catalog store interface shared by all storage backends."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class CatalogStore(ABC, Generic[T]):
    """
    Ordered key-value store holding one kind of record.

    Services hold one store per entity type (movies, shows). Values handed
    out by a store are snapshots: changing one has no effect until it is
    written back with insert().
    """

    @abstractmethod
    async def insert(self, key: str, value: T) -> None:
        """Store value under key, replacing any existing value."""

    @abstractmethod
    async def get(self, key: str, *, for_update: bool = False) -> T | None:
        """
        Fetch the value stored under key.

        Args:
            key: Record identifier
            for_update: Lock the record against concurrent writers until the
                surrounding transaction ends (backends without transactions
                ignore this)

        Returns:
            The stored value or None if key is absent
        """

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""

    @abstractmethod
    async def values(self) -> list[T]:
        """Return every stored value in store order."""
