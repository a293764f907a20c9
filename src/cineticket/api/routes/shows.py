"""Show and booking API endpoints."""

from fastapi import APIRouter, Depends, Query

from cineticket.api.deps import get_cinema_service
from cineticket.schemas import BookingRequest, BookingResponse, ErrorResponse, ShowResponse
from cineticket.services.cinema import CinemaService

router = APIRouter()


@router.get("/shows", response_model=list[ShowResponse])
async def get_show_list(
    movie_id: str | None = Query(None, description="Only list shows of this movie"),
    service: CinemaService = Depends(get_cinema_service),
) -> list[ShowResponse]:
    shows = await service.get_show_list(movie_id=movie_id)
    return [ShowResponse.model_validate(show) for show in shows]


@router.get("/shows/{show_id}", response_model=ShowResponse | None)
async def get_show_details(
    show_id: str,
    service: CinemaService = Depends(get_cinema_service),
) -> ShowResponse | None:
    """Get a single show, or null if there is no show with this id."""
    show = await service.get_show_details(show_id)
    return ShowResponse.model_validate(show) if show else None


@router.post(
    "/shows/{show_id}/bookings",
    response_model=BookingResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def book_ticket(
    show_id: str,
    request: BookingRequest,
    service: CinemaService = Depends(get_cinema_service),
) -> BookingResponse:
    """
    Book seats on a show.

    Fails with 409 if fewer seats remain than requested; the show is
    left unchanged in that case.
    """
    booked_id = await service.book_ticket(show_id, request.seats)
    return BookingResponse(id=booked_id)
