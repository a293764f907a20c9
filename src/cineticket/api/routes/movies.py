"""Movie API endpoints."""

from fastapi import APIRouter, Depends, status

from cineticket.api.deps import get_cinema_service
from cineticket.schemas import ErrorResponse, MovieCreate, MovieIdResponse, MovieResponse
from cineticket.services.cinema import CinemaService

router = APIRouter()


@router.post(
    "/movies",
    response_model=MovieIdResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def add_movie(
    request: MovieCreate,
    service: CinemaService = Depends(get_cinema_service),
) -> MovieIdResponse:
    """
    Add a movie and generate its shows for the day.

    Shows start at first_show_time and follow each other with a 30-minute
    cleaning gap. Rejected with 422 if the schedule does not fit in the day.
    """
    movie_id = await service.add_movie(
        name=request.name,
        price=request.price,
        duration_minutes=request.duration_minutes,
        first_show_time=request.first_show_time,
        show_amount=request.show_amount,
        seat_amount=request.seat_amount,
    )
    return MovieIdResponse(id=movie_id)


@router.delete(
    "/movies/{movie_id}",
    response_model=MovieIdResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_movie(
    movie_id: str,
    service: CinemaService = Depends(get_cinema_service),
) -> MovieIdResponse:
    """Delete a movie and all of its shows."""
    deleted_id = await service.delete_movie(movie_id)
    return MovieIdResponse(id=deleted_id)


@router.get("/movies", response_model=list[MovieResponse])
async def get_movie_list(
    service: CinemaService = Depends(get_cinema_service),
) -> list[MovieResponse]:
    movies = await service.get_movie_list()
    return [MovieResponse.model_validate(movie) for movie in movies]


@router.get("/movies/{movie_id}", response_model=MovieResponse | None)
async def get_movie_details(
    movie_id: str,
    service: CinemaService = Depends(get_cinema_service),
) -> MovieResponse | None:
    """
    Get a single movie.

    Returns:
        The movie, including the ids of its shows in start order, or null if
        there is no movie with this id
    """
    movie = await service.get_movie_details(movie_id)
    return MovieResponse.model_validate(movie) if movie else None
