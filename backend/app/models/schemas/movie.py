"""Pydantic schemas for movies."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MovieBase(BaseModel):
    """Base schema for movie with common fields."""

    name: str = Field(..., min_length=1, max_length=255)
    adults_only: bool = False


class MovieCreate(MovieBase):
    """Schema for adding a movie to the catalogue."""

    pass


class MovieResponse(MovieBase):
    """Schema for movie response; rental_id is null when the movie is available."""

    id: int
    rental_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
