"""SQLAdmin model views."""

from sqladmin import ModelView

from cineticket.models.movie import Movie
from cineticket.models.show import Show


class MovieAdmin(ModelView, model=Movie):
    column_list = [
        Movie.id,
        Movie.name,
        Movie.price,
        Movie.duration_minutes,
        Movie.first_show_time,
        Movie.show_amount,
        Movie.seat_amount,
    ]
    column_searchable_list = [Movie.name]
    column_sortable_list = [Movie.name, Movie.first_show_time]
    # Movies are created through the API so that their shows are generated
    can_create = False
    can_edit = False


class ShowAdmin(ModelView, model=Show):
    column_list = [
        Show.id,
        Show.movie_id,
        Show.start_time,
        Show.end_time,
        Show.available_seats,
    ]
    column_searchable_list = [Show.movie_id]
    column_sortable_list = [Show.start_time, Show.available_seats]
    can_create = False
    can_edit = False
    can_delete = False
