"""Concrete eligibility checks for rental creation."""

from app.core.exceptions import (
    InsufficientAgeError,
    MovieUnavailableError,
    PendingRentalError,
)
from app.models.domain.movie import Movie
from app.models.domain.user import User
from app.services.eligibility.base import (
    CheckResult,
    EligibilityCheck,
    EligibilityContext,
    MovieCheck,
)


class NoPendingRentalCheck(EligibilityCheck):
    """A user may hold at most one open rental."""

    name = "no_pending_rental"

    def evaluate(self, context: EligibilityContext) -> CheckResult:
        if any(rental.is_open for rental in context.user_rentals):
            return CheckResult.fail(PendingRentalError(context.user.id))
        return CheckResult.ok()


class AgeRestrictionCheck(MovieCheck):
    """Adults-only movies can only be rented by adults."""

    name = "age_restriction"

    def evaluate_movie(self, user: User, movie: Movie) -> CheckResult:
        if movie.adults_only and not user.is_adult:
            return CheckResult.fail(InsufficientAgeError(movie.id))
        return CheckResult.ok()


class MovieAvailabilityCheck(MovieCheck):
    """A movie already held by an open rental cannot be rented again."""

    name = "movie_availability"

    def evaluate_movie(self, user: User, movie: Movie) -> CheckResult:
        if not movie.is_available:
            return CheckResult.fail(MovieUnavailableError(movie.id))
        return CheckResult.ok()
