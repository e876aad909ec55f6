"""Pydantic schemas for rentals."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.schemas.movie import MovieResponse


class RentalCreate(BaseModel):
    """Schema for opening a rental."""

    user_id: int
    movie_ids: list[int] = Field(..., min_length=1, description="Movies to rent, in check order")

    @field_validator("movie_ids")
    @classmethod
    def drop_duplicates(cls, v: list[int]) -> list[int]:
        """Collapse repeated ids, keeping first-seen order."""
        return list(dict.fromkeys(v))


class RentalResponse(BaseModel):
    """Schema for rental response."""

    id: int
    user_id: int
    date: datetime
    end_date: datetime
    closed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RentalDetailResponse(RentalResponse):
    """Schema for rental with the movies it holds."""

    movies: list[MovieResponse] = []

    model_config = ConfigDict(from_attributes=True)
