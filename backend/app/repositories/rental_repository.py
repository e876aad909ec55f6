"""Repository for rentals and the movie assignments they hold."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import MovieUnavailableError, PendingRentalError
from app.models.domain.movie import Movie
from app.models.domain.rental import Rental
from app.repositories.base import BaseRepository, is_storable_id

logger = logging.getLogger(__name__)

OPEN_RENTAL_INDEX = "uq_rentals_user_open"


class RentalRepository(BaseRepository[Rental]):
    """
    Repository for Rental with movie assignment.

    create_rental and finish_rental each issue all of their writes on the
    caller's session without committing, so the caller decides the
    transaction boundary. The availability re-check is folded into the
    assigning UPDATE itself, which makes concurrent rentals of the same
    movie lose cleanly instead of overwriting each other.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the rental repository.

        Args:
            db: Async database session
        """
        super().__init__(Rental, db)

    async def get_rentals(self) -> List[Rental]:
        """
        Retrieve every rental with its movies, ordered by ID.

        Returns:
            List of rentals with movies loaded
        """
        stmt = (
            select(Rental)
            .options(selectinload(Rental.movies))
            .order_by(Rental.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id_with_movies(self, id: int) -> Optional[Rental]:
        """
        Retrieve a rental by ID with its movies eagerly loaded.

        Args:
            id: The rental ID

        Returns:
            The rental with movies loaded, or None if not found
        """
        if not is_storable_id(id):
            return None

        stmt = (
            select(Rental)
            .where(Rental.id == id)
            .options(selectinload(Rental.movies))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: int) -> List[Rental]:
        """
        Retrieve all rentals, open or closed, owned by a user.

        Args:
            user_id: The owning user's ID

        Returns:
            List of the user's rentals ordered by ID
        """
        if not is_storable_id(user_id):
            return []
        return await self.find_by(user_id=user_id)

    async def create_rental(
        self,
        user_id: int,
        movie_ids: Iterable[int],
        rented_at: datetime,
        end_date: datetime,
    ) -> Rental:
        """
        Insert an open rental and assign every listed movie to it.

        Args:
            user_id: Owner of the new rental
            movie_ids: Movies to assign; all must currently be available
            rented_at: Opening timestamp
            end_date: Expected return timestamp

        Returns:
            The new rental with its movies loaded

        Raises:
            PendingRentalError: If another open rental for the user was
                committed concurrently
            MovieUnavailableError: If any movie was no longer available at
                write time; nothing should be committed afterwards
        """
        requested = list(dict.fromkeys(movie_ids))

        rental = Rental(user_id=user_id, date=rented_at, end_date=end_date, closed=False)
        self.db.add(rental)
        try:
            await self.db.flush()
        except IntegrityError as e:
            if _violates_open_rental_index(e):
                raise PendingRentalError(user_id) from e
            raise

        stmt = (
            update(Movie)
            .where(
                Movie.id.in_([movie_id for movie_id in requested if is_storable_id(movie_id)]),
                Movie.rental_id.is_(None),
            )
            .values(rental_id=rental.id)
            .returning(Movie.id)
        )
        result = await self.db.execute(stmt)
        assigned = set(result.scalars().all())

        missing = [movie_id for movie_id in requested if movie_id not in assigned]
        if missing:
            logger.warning(
                f"Movies {missing} were taken before rental {rental.id} could claim them"
            )
            raise MovieUnavailableError(missing[0])

        return await self.get_by_id_with_movies(rental.id)

    async def finish_rental(self, id: int) -> None:
        """
        Close a rental and release all of its movies.

        Args:
            id: The rental ID
        """
        await self.db.execute(
            update(Rental).where(Rental.id == id).values(closed=True)
        )
        await self.db.execute(
            update(Movie).where(Movie.rental_id == id).values(rental_id=None)
        )
        await self.db.flush()


def _violates_open_rental_index(error: IntegrityError) -> bool:
    """Tell a one-open-rental-per-user violation apart from other integrity errors."""
    message = str(error.orig)
    # SQLite reports the columns rather than the index name
    return OPEN_RENTAL_INDEX in message or "rentals.user_id" in message
