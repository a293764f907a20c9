"""Records held by the catalog stores."""

from dataclasses import dataclass, field


@dataclass
class MovieRecord:
    """
    A movie and the parameters its daily schedule was generated from.

    This is the format every catalog store accepts and returns; the SQL store
    maps it onto the movies table.
    """

    id: str
    name: str
    price: int  # Ticket price in the smallest currency unit
    duration_minutes: int
    first_show_time: str  # "HH:mm"
    show_amount: int
    seat_amount: int  # Seats per show
    show_ids: list[str] = field(default_factory=list)  # Owned shows, in start order


@dataclass
class ShowRecord:
    """One screening of a movie with its own seat inventory."""

    id: str
    movie_id: str
    start_time: str  # "HH:mm"
    end_time: str  # "HH:mm"
    available_seats: int
    valid: bool = True

    def __post_init__(self) -> None:
        """Validate that the seat count is never negative."""
        if self.available_seats < 0:
            raise ValueError("available_seats must not be negative")
