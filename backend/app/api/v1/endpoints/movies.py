"""Movie catalogue endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.endpoints.errors import to_http_exception
from app.core.exceptions import RentalError
from app.deps import get_movie_service
from app.models.schemas.movie import MovieCreate, MovieResponse
from app.services.movie_service import MovieService

router = APIRouter()


@router.post(
    "/",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a movie",
)
async def create_movie(
    movie_data: MovieCreate,
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> MovieResponse:
    movie = await service.create_movie(**movie_data.model_dump())
    return MovieResponse.model_validate(movie)


@router.get(
    "/",
    response_model=list[MovieResponse],
    summary="List movies",
)
async def list_movies(
    service: Annotated[MovieService, Depends(get_movie_service)],
    available: Annotated[
        bool, Query(description="Only movies not held by an open rental")
    ] = False,
) -> list[MovieResponse]:
    movies = await service.get_movies(available_only=available)
    return [MovieResponse.model_validate(movie) for movie in movies]


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Get movie by ID",
)
async def get_movie(
    movie_id: int,
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> MovieResponse:
    try:
        movie = await service.get_movie(movie_id)
    except RentalError as e:
        raise to_http_exception(e)
    return MovieResponse.model_validate(movie)
