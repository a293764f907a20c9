"""Domain errors returned to API callers."""

from typing import Any


class CinemaTicketError(Exception):
    """
    Base class for every expected, caller-visible failure.

    Subclasses form a closed set of variants. Each one knows its HTTP
    status code so the API layer can translate it without a lookup table.
    """

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "detail": self.message}


class MovieDoesNotExist(CinemaTicketError):
    status_code = 404

    def __init__(self, movie_id: str) -> None:
        super().__init__(f"Movie {movie_id} does not exist")
        self.movie_id = movie_id

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "movie_id": self.movie_id}


class ScheduleDoesNotExist(CinemaTicketError):
    status_code = 404

    def __init__(self, show_id: str) -> None:
        super().__init__(f"Show {show_id} does not exist")
        self.show_id = show_id

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "show_id": self.show_id}


class NoAvailableSeats(CinemaTicketError):
    status_code = 409


class NotPositiveInteger(CinemaTicketError):
    status_code = 422


class TimeFormatError(CinemaTicketError):
    status_code = 422


class DurationError(CinemaTicketError):
    status_code = 422


class ShowAmountError(CinemaTicketError):
    status_code = 422

    def __init__(self, message: str, max_shows: int) -> None:
        super().__init__(message)
        self.max_shows = max_shows

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "max_shows": self.max_shows}
