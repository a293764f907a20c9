"""Show model for individual screenings and their seat inventory."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cineticket.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cineticket.models.movie import Movie


class Show(Base, TimestampMixin):
    """
    Show (screening) model.

    Times are stored as zero-padded "HH:mm" strings, which sort in
    chronological order.
    """

    __tablename__ = "shows"
    __table_args__ = (
        CheckConstraint("available_seats >= 0", name="ck_shows_available_seats"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    movie_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    valid: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="shows")

    def __repr__(self) -> str:
        return (
            f"<Show(movie_id={self.movie_id!r}, "
            f"start_time={self.start_time!r}, "
            f"available_seats={self.available_seats})>"
        )
