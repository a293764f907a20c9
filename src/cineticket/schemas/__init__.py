"""Pydantic schemas for API requests and responses."""

from cineticket.schemas.error import ErrorResponse
from cineticket.schemas.movie import MovieCreate, MovieIdResponse, MovieResponse
from cineticket.schemas.show import BookingRequest, BookingResponse, ShowResponse

__all__ = [
    "BookingRequest",
    "BookingResponse",
    "ErrorResponse",
    "MovieCreate",
    "MovieIdResponse",
    "MovieResponse",
    "ShowResponse",
]
