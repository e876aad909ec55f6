"""Eligibility check foundation: context, tagged result and base check."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.exceptions import RentalError
from app.models.domain.movie import Movie
from app.models.domain.rental import Rental
from app.models.domain.user import User


@dataclass
class EligibilityContext:
    """
    Data a check needs to decide whether a rental may proceed.

    User-level checks run with movie=None; movie-level checks run once per
    requested movie, in the order the movies were requested.

    Attributes:
        user: The user asking for the rental
        user_rentals: Every rental the user owns, open or closed
        movie: The movie under evaluation, if any
    """

    user: User
    user_rentals: List[Rental] = field(default_factory=list)
    movie: Optional[Movie] = None


@dataclass
class CheckResult:
    """
    Outcome of a single check: either passed, or failed with a domain error.

    Attributes:
        passed: Whether the check passed
        error: The error to surface when the check failed
    """

    passed: bool
    error: Optional[RentalError] = None

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(passed=True)

    @classmethod
    def fail(cls, error: RentalError) -> "CheckResult":
        return cls(passed=False, error=error)


class EligibilityCheck(ABC):
    """
    Abstract base class for eligibility checks using the Strategy pattern.

    A check is a pure predicate over an EligibilityContext; all lookups
    happen in the engine before the check runs.
    """

    name: str = "check"

    @abstractmethod
    def evaluate(self, context: EligibilityContext) -> CheckResult:
        """
        Evaluate the check against the provided context.

        Args:
            context: EligibilityContext with the user and, for movie
                checks, the movie under evaluation

        Returns:
            CheckResult.ok() or CheckResult.fail(error)
        """
        pass


class MovieCheck(EligibilityCheck):
    """Check that runs once per requested movie and requires context.movie."""

    def evaluate(self, context: EligibilityContext) -> CheckResult:
        if context.movie is None:
            raise ValueError(f"{self.name} requires a movie in the context")
        return self.evaluate_movie(context.user, context.movie)

    @abstractmethod
    def evaluate_movie(self, user: User, movie: Movie) -> CheckResult:
        pass
