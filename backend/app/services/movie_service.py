"""Movie catalogue service."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import EntityType
from app.core.exceptions import NotFoundError
from app.models.domain.movie import Movie
from app.repositories.movie_repository import MovieRepository


class MovieService:
    """Service for adding and browsing movies. Rental state is read-only here."""

    def __init__(self, db: AsyncSession):
        """
        Initialize the movie service.

        Args:
            db: Async database session
        """
        self.db = db
        self.repo = MovieRepository(db)

    async def create_movie(self, name: str, adults_only: bool = False) -> Movie:
        """
        Add a movie to the catalogue, available for rental.

        Args:
            name: Movie title
            adults_only: Whether only adults may rent it

        Returns:
            The created movie
        """
        movie = await self.repo.create(name=name, adults_only=adults_only)
        await self.db.commit()
        return movie

    async def get_movie(self, movie_id: int) -> Movie:
        """
        Retrieve a movie by ID.

        Args:
            movie_id: ID of the movie

        Returns:
            The movie

        Raises:
            NotFoundError: If no movie has this ID
        """
        movie = await self.repo.get_by_id(movie_id)
        if movie is None:
            raise NotFoundError(EntityType.MOVIE, movie_id)
        return movie

    async def get_movies(self, available_only: bool = False) -> List[Movie]:
        """
        List movies ordered by ID.

        Args:
            available_only: Only return movies not held by an open rental

        Returns:
            List of movies
        """
        if available_only:
            return await self.repo.get_available()
        return await self.repo.get_all()
