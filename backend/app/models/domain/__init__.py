"""Domain models for the application."""

from app.models.domain.movie import Movie
from app.models.domain.rental import Rental
from app.models.domain.user import User

__all__ = [
    "Movie",
    "Rental",
    "User",
]
