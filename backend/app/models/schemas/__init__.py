"""Pydantic schemas for API validation and serialization."""

from app.models.schemas.movie import MovieCreate, MovieResponse
from app.models.schemas.rental import (
    RentalCreate,
    RentalDetailResponse,
    RentalResponse,
)
from app.models.schemas.user import UserCreate, UserResponse

__all__ = [
    # Movie schemas
    "MovieCreate",
    "MovieResponse",
    # Rental schemas
    "RentalCreate",
    "RentalResponse",
    "RentalDetailResponse",
    # User schemas
    "UserCreate",
    "UserResponse",
]
