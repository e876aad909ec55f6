"""Rental service owning the rental lifecycle and its unit of work."""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.enums import EntityType
from app.core.exceptions import NotFoundError
from app.models.domain.rental import Rental
from app.repositories.movie_repository import MovieRepository
from app.repositories.rental_repository import RentalRepository
from app.repositories.user_repository import UserRepository
from app.services.eligibility import EligibilityEngine

logger = logging.getLogger(__name__)


class RentalService:
    """
    Rental service exposing the four rental operations.

    The session passed in is the unit of work: a rental is created or
    closed by one commit, and any failure rolls the whole session back.
    Repositories can be injected to replace the storage layer.
    """

    def __init__(
        self,
        db: AsyncSession,
        user_repo: Optional[UserRepository] = None,
        movie_repo: Optional[MovieRepository] = None,
        rental_repo: Optional[RentalRepository] = None,
        rental_duration: Optional[timedelta] = None,
    ):
        """
        Initialize the rental service.

        Args:
            db: Async database session
            user_repo: User store, defaults to a UserRepository on db
            movie_repo: Movie store, defaults to a MovieRepository on db
            rental_repo: Rental store, defaults to a RentalRepository on db
            rental_duration: Time until a rental is due back, defaults to
                RENTAL_DURATION_DAYS from settings
        """
        self.db = db
        self.user_repo = user_repo if user_repo is not None else UserRepository(db)
        self.movie_repo = movie_repo if movie_repo is not None else MovieRepository(db)
        self.rental_repo = rental_repo if rental_repo is not None else RentalRepository(db)
        self.rental_duration = rental_duration or timedelta(
            days=settings.RENTAL_DURATION_DAYS
        )
        self.eligibility = EligibilityEngine(
            user_repo=self.user_repo,
            movie_repo=self.movie_repo,
            rental_repo=self.rental_repo,
        )

    async def get_rentals(self) -> List[Rental]:
        """
        Retrieve all rentals with their movies.

        Returns:
            Every rental, ordered by ID
        """
        return await self.rental_repo.get_rentals()

    async def get_rental_by_id(self, rental_id: int) -> Rental:
        """
        Retrieve a rental with the movies it currently holds.

        Args:
            rental_id: ID of the rental

        Returns:
            The rental with movies loaded

        Raises:
            NotFoundError: If no rental has this ID
        """
        rental = await self.rental_repo.get_by_id_with_movies(rental_id)
        if rental is None:
            raise NotFoundError(EntityType.RENTAL, rental_id)
        return rental

    async def create_rental(self, user_id: int, movie_ids: Sequence[int]) -> Rental:
        """
        Open a rental for a user over a set of movies.

        All eligibility checks run before anything is written; the rental
        insert and the movie assignments are then committed together.

        Args:
            user_id: ID of the renting user
            movie_ids: IDs of the movies to rent, checked in this order

        Returns:
            The persisted rental

        Raises:
            ValueError: If movie_ids is empty
            NotFoundError: If the user or a movie does not exist
            PendingRentalError: If the user already has an open rental
            InsufficientAgeError: If a minor requests an adults-only movie
            MovieUnavailableError: If a movie is held by another rental
        """
        result = await self.eligibility.evaluate(user_id, movie_ids)
        if not result.eligible:
            logger.info(
                f"Rental for user {user_id} rejected: {result.error.code.value} "
                f"({result.error.message})"
            )
            result.raise_for_error()

        rented_at = datetime.now(timezone.utc)
        try:
            rental = await self.rental_repo.create_rental(
                user_id=user_id,
                movie_ids=[movie.id for movie in result.movies],
                rented_at=rented_at,
                end_date=rented_at + self.rental_duration,
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"Created rental {rental.id} for user {user_id} "
            f"with {len(result.movies)} movie(s)"
        )
        return rental

    async def finish_rental(self, rental_id: int) -> None:
        """
        Close a rental and make all of its movies available again.

        Finishing a rental that is already closed does nothing.

        Args:
            rental_id: ID of the rental to close

        Raises:
            NotFoundError: If no rental has this ID
        """
        rental = await self.rental_repo.get_by_id_with_movies(rental_id)
        if rental is None:
            raise NotFoundError(EntityType.RENTAL, rental_id)

        if rental.closed:
            logger.info(f"Rental {rental_id} is already closed")
            return

        try:
            await self.rental_repo.finish_rental(rental_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Finished rental {rental_id}, released {len(rental.movies)} movie(s)")
