"""Dependency injection for FastAPI endpoints."""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services.movie_service import MovieService
from app.services.rental_service import RentalService
from app.services.user_service import UserService

__all__ = ["get_db", "get_session", "get_rental_service", "get_movie_service", "get_user_service"]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    This is an alias for get_db for clarity in endpoint signatures.
    """
    async for session in get_db():
        yield session


def get_rental_service(db: AsyncSession = Depends(get_session)) -> RentalService:
    """Rental service bound to the request's session."""
    return RentalService(db)


def get_movie_service(db: AsyncSession = Depends(get_session)) -> MovieService:
    return MovieService(db)


def get_user_service(db: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(db)
