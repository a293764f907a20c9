"""Pydantic schemas for show data and bookings."""

from pydantic import BaseModel, ConfigDict, Field

from cineticket.services.validation import MAX_STORED_INTEGER


class ShowResponse(BaseModel):
    """Show response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    movie_id: str
    start_time: str
    end_time: str
    available_seats: int
    valid: bool = True


class BookingRequest(BaseModel):
    """Request body for booking seats on a show."""

    seats: int = Field(..., le=MAX_STORED_INTEGER)


class BookingResponse(BaseModel):
    """Id of the show that was booked."""

    id: str
