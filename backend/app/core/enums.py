"""Core enums for type safety across the application."""

from enum import Enum


class RentalErrorCode(str, Enum):
    """Stable identifiers for rental rule violations."""

    NOT_FOUND = "NOT_FOUND"
    PENDING_RENTAL = "PENDING_RENTAL"
    INSUFFICIENT_AGE = "INSUFFICIENT_AGE"
    MOVIE_UNAVAILABLE = "MOVIE_UNAVAILABLE"


class EntityType(str, Enum):
    """Entities that can be looked up by id."""

    USER = "User"
    MOVIE = "Movie"
    RENTAL = "Rental"
