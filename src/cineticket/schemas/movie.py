"""Pydantic schemas for movie data."""

from pydantic import BaseModel, ConfigDict, Field

from cineticket.services.validation import MAX_STORED_INTEGER


class MovieBase(BaseModel):
    """Base movie schema with common fields."""

    name: str
    price: int
    duration_minutes: int
    first_show_time: str
    show_amount: int
    seat_amount: int


class MovieCreate(MovieBase):
    """
    Request body for adding a movie.

    Only shape and range are checked here; the schedule rules are applied by
    CinemaService so their errors reach the client as domain errors.
    """

    name: str = Field(..., min_length=1, max_length=500)
    price: int = Field(
        ...,
        ge=0,
        le=MAX_STORED_INTEGER,
        description="Ticket price in the smallest currency unit",
    )
    duration_minutes: int = Field(..., le=MAX_STORED_INTEGER)
    first_show_time: str = Field(..., description="Start of the first show (HH:mm)")
    show_amount: int = Field(..., le=MAX_STORED_INTEGER, description="Number of shows in the day")
    seat_amount: int = Field(..., le=MAX_STORED_INTEGER, description="Seats available in each show")


class MovieResponse(MovieBase):
    """Movie response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    show_ids: list[str] = []


class MovieIdResponse(BaseModel):
    """Id of the movie an operation created or deleted."""

    id: str
