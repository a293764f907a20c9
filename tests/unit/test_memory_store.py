"""Unit tests for the in-memory catalog store."""

from cineticket.store.memory import InMemoryStore
from cineticket.store.models import MovieRecord


def make_movie(id: str, name: str = "Inception") -> MovieRecord:
    return MovieRecord(
        id=id,
        name=name,
        price=1000,
        duration_minutes=150,
        first_show_time="10:00",
        show_amount=3,
        seat_amount=50,
    )


async def test_get_returns_none_for_missing_key() -> None:
    store: InMemoryStore[MovieRecord] = InMemoryStore()
    assert await store.get("missing") is None


async def test_values_follow_insertion_order() -> None:
    store: InMemoryStore[MovieRecord] = InMemoryStore()
    for key in ["b", "a", "c"]:
        await store.insert(key, make_movie(key))

    assert [m.id for m in await store.values()] == ["b", "a", "c"]


async def test_insert_overwrites_in_place() -> None:
    store: InMemoryStore[MovieRecord] = InMemoryStore()
    await store.insert("a", make_movie("a"))
    await store.insert("b", make_movie("b"))
    await store.insert("a", make_movie("a", name="Tenet"))

    values = await store.values()
    assert [m.id for m in values] == ["a", "b"]
    assert values[0].name == "Tenet"
    assert len(store) == 2


async def test_returned_values_are_snapshots() -> None:
    store: InMemoryStore[MovieRecord] = InMemoryStore()
    original = make_movie("a")
    await store.insert("a", original)
    original.name = "changed before read"

    fetched = await store.get("a")
    assert fetched is not None
    assert fetched.name == "Inception"

    fetched.show_ids.append("show-x")
    again = await store.get("a")
    assert again is not None
    assert again.show_ids == []


async def test_remove_is_idempotent() -> None:
    store: InMemoryStore[MovieRecord] = InMemoryStore()
    await store.insert("a", make_movie("a"))

    await store.remove("a")
    await store.remove("a")

    assert await store.get("a") is None
    assert await store.values() == []
