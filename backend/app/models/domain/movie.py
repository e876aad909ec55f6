"""Movie domain model."""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import BaseModel


class Movie(BaseModel):
    """
    Physical copy of a movie in the catalogue.

    rental_id is the only link between a movie and its rental: it points at
    the open rental currently holding the copy and is null when available.
    """

    __tablename__ = "movies"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    adults_only: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    rental_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("rentals.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    @property
    def is_available(self) -> bool:
        return self.rental_id is None

    def __repr__(self) -> str:
        return (
            f"<Movie(id={self.id}, name={self.name!r}, "
            f"adults_only={self.adults_only}, rental_id={self.rental_id})>"
        )
