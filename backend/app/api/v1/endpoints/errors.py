"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException, status

from app.core.enums import RentalErrorCode
from app.core.exceptions import RentalError

ERROR_STATUS_CODES = {
    RentalErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    RentalErrorCode.PENDING_RENTAL: status.HTTP_409_CONFLICT,
    RentalErrorCode.INSUFFICIENT_AGE: status.HTTP_403_FORBIDDEN,
    RentalErrorCode.MOVIE_UNAVAILABLE: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: RentalError) -> HTTPException:
    """Build the HTTPException for a rental rule violation."""
    return HTTPException(
        status_code=ERROR_STATUS_CODES.get(error.code, status.HTTP_400_BAD_REQUEST),
        detail=error.to_dict(),
    )
