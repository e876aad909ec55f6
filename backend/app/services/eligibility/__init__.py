"""Eligibility pipeline deciding whether a rental may be created."""

from .base import CheckResult, EligibilityCheck, EligibilityContext, MovieCheck
from .checks import AgeRestrictionCheck, MovieAvailabilityCheck, NoPendingRentalCheck
from .engine import EligibilityEngine, EligibilityResult

__all__ = [
    "AgeRestrictionCheck",
    "CheckResult",
    "EligibilityCheck",
    "EligibilityContext",
    "EligibilityEngine",
    "EligibilityResult",
    "MovieAvailabilityCheck",
    "MovieCheck",
    "NoPendingRentalCheck",
]
