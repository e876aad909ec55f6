"""Service layer for business logic."""

from app.services.movie_service import MovieService
from app.services.rental_service import RentalService
from app.services.user_service import UserService

__all__ = ["MovieService", "RentalService", "UserService"]
