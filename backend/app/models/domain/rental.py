"""Rental domain model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import BaseModel
from app.models.domain.movie import Movie


class Rental(BaseModel):
    """
    A loan of one or more movies to a user.

    Opens with closed=False and is closed exactly once. The movies
    collection is a read-only view over Movie.rental_id; assignment and
    release go through RentalRepository.
    """

    __tablename__ = "rentals"
    __table_args__ = (
        # At most one open rental per user, enforced by the database
        Index(
            "uq_rentals_user_open",
            "user_id",
            unique=True,
            postgresql_where=text("closed = false"),
            sqlite_where=text("closed = false"),
        ),
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    closed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    movies: Mapped[list[Movie]] = relationship(
        Movie,
        primaryjoin="Rental.id == Movie.rental_id",
        foreign_keys="Movie.rental_id",
        viewonly=True,
        order_by="Movie.id",
    )

    @property
    def is_open(self) -> bool:
        return not self.closed

    def __repr__(self) -> str:
        return (
            f"<Rental(id={self.id}, user_id={self.user_id}, "
            f"closed={self.closed}, end_date={self.end_date})>"
        )
