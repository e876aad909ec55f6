"""Rental endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.endpoints.errors import to_http_exception
from app.core.exceptions import RentalError
from app.deps import get_rental_service
from app.models.schemas.rental import RentalCreate, RentalDetailResponse
from app.services.rental_service import RentalService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_model=list[RentalDetailResponse],
    summary="List all rentals",
    description="Retrieve every rental with the movies it currently holds",
)
async def list_rentals(
    service: Annotated[RentalService, Depends(get_rental_service)],
) -> list[RentalDetailResponse]:
    """List all rentals, open and closed."""
    rentals = await service.get_rentals()
    return [RentalDetailResponse.model_validate(rental) for rental in rentals]


@router.get(
    "/{rental_id}",
    response_model=RentalDetailResponse,
    summary="Get rental by ID",
    description="Retrieve a rental by its ID with its movies",
)
async def get_rental(
    rental_id: int,
    service: Annotated[RentalService, Depends(get_rental_service)],
) -> RentalDetailResponse:
    """Retrieve a rental by ID."""
    try:
        rental = await service.get_rental_by_id(rental_id)
        return RentalDetailResponse.model_validate(rental)

    except RentalError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Error retrieving rental {rental_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve rental",
        )


@router.post(
    "/",
    response_model=RentalDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a rental",
    description="Open a rental for a user over one or more available movies",
)
async def create_rental(
    rental_data: RentalCreate,
    service: Annotated[RentalService, Depends(get_rental_service)],
) -> RentalDetailResponse:
    """
    Create a rental.

    The request is rejected, with nothing written, when:
    - the user or any movie does not exist (404)
    - the user already has an open rental (409)
    - a minor requests an adults-only movie (403)
    - a movie is held by another rental (409)
    """
    try:
        rental = await service.create_rental(rental_data.user_id, rental_data.movie_ids)
        return RentalDetailResponse.model_validate(rental)

    except RentalError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logger.error(f"Validation error creating rental: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error creating rental: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create rental",
        )


@router.post(
    "/{rental_id}/finish",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Finish a rental",
    description="Close a rental and make its movies available again",
)
async def finish_rental(
    rental_id: int,
    service: Annotated[RentalService, Depends(get_rental_service)],
) -> None:
    """Finish a rental. Finishing an already closed rental succeeds without changes."""
    try:
        await service.finish_rental(rental_id)

    except RentalError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Error finishing rental {rental_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to finish rental",
        )
