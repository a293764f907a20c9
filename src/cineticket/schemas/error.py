"""Pydantic schema for domain error responses."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every CinemaTicketError."""

    error: str
    detail: str
    movie_id: str | None = None
    show_id: str | None = None
    max_shows: int | None = None
