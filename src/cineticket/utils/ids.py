"""Identifier factories for catalog records."""

import itertools
import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def random_id() -> str:
    """Return a random 128-bit identifier as 32 hex characters."""
    return uuid.uuid4().hex


def sequential_ids(prefix: str) -> IdFactory:
    """
    Build a factory producing predictable ids: "<prefix>-1", "<prefix>-2", ...

    Useful for seeding and for tests that need to know ids in advance.
    """
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"
