"""Movie model for storing movies and their schedule parameters."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cineticket.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cineticket.models.show import Show


class Movie(Base, TimestampMixin):
    """
    Movie model.

    Stores the parameters the daily show schedule was generated from.
    Deleting a movie deletes its shows.
    """

    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    first_show_time: Mapped[str] = mapped_column(String(5), nullable=False)
    show_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_amount: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    shows: Mapped[list["Show"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Show.start_time",
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, name={self.name!r})>"
