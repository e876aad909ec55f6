"""Domain errors raised by the rental services."""

from typing import Any, Dict, Optional, Union

from app.core.enums import EntityType, RentalErrorCode


class RentalError(Exception):
    """
    Base class for rental business-rule violations.

    These are deterministic validation failures: they are surfaced to the
    caller as-is and never retried.

    Attributes:
        code: Stable error code identifying the violated rule
        message: Human-readable explanation
        details: Optional structured context (ids involved)
    """

    code: RentalErrorCode

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for an API response body."""
        return {"code": self.code.value, "message": self.message, "details": self.details}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RentalError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class NotFoundError(RentalError):
    """A referenced user, movie or rental does not exist."""

    code = RentalErrorCode.NOT_FOUND

    def __init__(
        self,
        entity: Union[EntityType, str],
        entity_id: Optional[int] = None,
    ):
        self.entity = EntityType(entity)
        details = {"entity": self.entity.value}
        if entity_id is not None:
            details["id"] = entity_id
        super().__init__(f"{self.entity.value} not found.", details)


class PendingRentalError(RentalError):
    """The user already holds an open rental."""

    code = RentalErrorCode.PENDING_RENTAL

    def __init__(self, user_id: Optional[int] = None):
        details = {"user_id": user_id} if user_id is not None else None
        super().__init__("The user already has an active rental.", details)


class InsufficientAgeError(RentalError):
    """An adults-only movie was requested by a user who is not an adult."""

    code = RentalErrorCode.INSUFFICIENT_AGE

    def __init__(self, movie_id: Optional[int] = None):
        details = {"movie_id": movie_id} if movie_id is not None else None
        super().__init__("Cannot see that movie.", details)


class MovieUnavailableError(RentalError):
    """The movie is already assigned to an open rental."""

    code = RentalErrorCode.MOVIE_UNAVAILABLE

    def __init__(self, movie_id: Optional[int] = None):
        details = {"movie_id": movie_id} if movie_id is not None else None
        super().__init__("Movie already in a rental.", details)
