"""Repository for movie catalogue lookups."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.domain.movie import Movie
from app.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """
    Repository for Movie.

    Read-only with respect to Movie.rental_id; assignment and release of
    movies happen in RentalRepository together with the rental write.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the movie repository.

        Args:
            db: Async database session
        """
        super().__init__(Movie, db)

    async def get_available(self) -> List[Movie]:
        """
        Retrieve movies not held by any open rental.

        Returns:
            Available movies ordered by ID
        """
        stmt = select(Movie).where(Movie.rental_id.is_(None)).order_by(Movie.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
