"""Eligibility engine orchestrating lookups and checks for a new rental."""

import logging
from typing import List, Optional, Sequence

from app.core.enums import EntityType
from app.core.exceptions import NotFoundError, RentalError
from app.models.domain.movie import Movie
from app.models.domain.user import User
from app.repositories.movie_repository import MovieRepository
from app.repositories.rental_repository import RentalRepository
from app.repositories.user_repository import UserRepository
from app.services.eligibility.base import (
    CheckResult,
    EligibilityCheck,
    EligibilityContext,
    MovieCheck,
)
from app.services.eligibility.checks import (
    AgeRestrictionCheck,
    MovieAvailabilityCheck,
    NoPendingRentalCheck,
)

logger = logging.getLogger(__name__)


class EligibilityResult:
    """
    Result of running the eligibility pipeline for one rental request.

    Attributes:
        eligible: True when every lookup and check passed
        user: The user, once found
        movies: Movies that passed every check, in request order
        error: The first failure, when not eligible
    """

    def __init__(
        self,
        eligible: bool,
        user: Optional[User] = None,
        movies: Optional[List[Movie]] = None,
        error: Optional[RentalError] = None,
    ):
        self.eligible = eligible
        self.user = user
        self.movies = movies or []
        self.error = error

    @classmethod
    def rejected(
        cls,
        error: RentalError,
        user: Optional[User] = None,
        movies: Optional[List[Movie]] = None,
    ) -> "EligibilityResult":
        return cls(eligible=False, user=user, movies=movies, error=error)

    def raise_for_error(self) -> None:
        """Raise the recorded failure, if any."""
        if self.error is not None:
            raise self.error


class EligibilityEngine:
    """
    Ordered, short-circuiting validation pipeline for rental creation.

    Stages, in order:
    1. user lookup (NotFound User)
    2. user checks, by default the pending-rental check
    3. for each requested movie: lookup (NotFound Movie), then movie checks,
       by default the age restriction before availability

    The engine only reads; it never writes.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        movie_repo: MovieRepository,
        rental_repo: RentalRepository,
    ):
        self.user_repo = user_repo
        self.movie_repo = movie_repo
        self.rental_repo = rental_repo
        self._user_checks: List[EligibilityCheck] = [NoPendingRentalCheck()]
        self._movie_checks: List[MovieCheck] = [
            AgeRestrictionCheck(),
            MovieAvailabilityCheck(),
        ]

    @property
    def checks(self) -> List[EligibilityCheck]:
        """All registered checks in execution order."""
        return [*self._user_checks, *self._movie_checks]

    def register_check(self, check: EligibilityCheck) -> None:
        """
        Append a custom check to the end of its stage.

        Args:
            check: A MovieCheck runs per movie, any other check once per user
        """
        if isinstance(check, MovieCheck):
            self._movie_checks.append(check)
        else:
            self._user_checks.append(check)

    async def evaluate(self, user_id: int, movie_ids: Sequence[int]) -> EligibilityResult:
        """
        Run every stage for a rental request, stopping at the first failure.

        Args:
            user_id: The requesting user's ID
            movie_ids: Requested movie IDs; duplicates are checked once

        Returns:
            EligibilityResult, eligible or carrying the first error

        Raises:
            ValueError: If no movie IDs were given
        """
        requested = list(dict.fromkeys(movie_ids))
        if not requested:
            raise ValueError("At least one movie is required for a rental")

        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            return EligibilityResult.rejected(NotFoundError(EntityType.USER, user_id))

        user_rentals = await self.rental_repo.get_by_user_id(user_id)
        context = EligibilityContext(user=user, user_rentals=user_rentals)

        failure = self._first_failure(self._user_checks, context)
        if failure is not None:
            return EligibilityResult.rejected(failure, user=user)

        movies: List[Movie] = []
        for movie_id in requested:
            movie = await self.movie_repo.get_by_id(movie_id)
            if movie is None:
                return EligibilityResult.rejected(
                    NotFoundError(EntityType.MOVIE, movie_id), user=user, movies=movies
                )

            context.movie = movie
            failure = self._first_failure(self._movie_checks, context)
            if failure is not None:
                return EligibilityResult.rejected(failure, user=user, movies=movies)
            movies.append(movie)

        return EligibilityResult(eligible=True, user=user, movies=movies)

    @staticmethod
    def _first_failure(
        checks: Sequence[EligibilityCheck],
        context: EligibilityContext,
    ) -> Optional[RentalError]:
        for check in checks:
            result: CheckResult = check.evaluate(context)
            if not result.passed:
                logger.debug(f"Eligibility check {check.name} failed: {result.error}")
                return result.error
        return None
