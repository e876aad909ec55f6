from .base import BaseRepository
from .movie_repository import MovieRepository
from .rental_repository import RentalRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "MovieRepository",
    "RentalRepository",
    "UserRepository",
]
