"""Process-local catalog store."""

import copy
from typing import TypeVar

from cineticket.store.base import CatalogStore

T = TypeVar("T")


class InMemoryStore(CatalogStore[T]):
    """Catalog store backed by a dict; values() follows insertion order."""

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    async def insert(self, key: str, value: T) -> None:
        self._items[key] = copy.deepcopy(value)

    async def get(self, key: str, *, for_update: bool = False) -> T | None:
        value = self._items.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def remove(self, key: str) -> None:
        self._items.pop(key, None)

    async def values(self) -> list[T]:
        return [copy.deepcopy(value) for value in self._items.values()]
