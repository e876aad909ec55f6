"""API v1 router configuration."""

from fastapi import APIRouter

from app.api.v1.endpoints import health, movies, rentals, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    rentals.router,
    prefix="/rentals",
    tags=["rentals"],
)

api_router.include_router(
    movies.router,
    prefix="/movies",
    tags=["movies"],
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["users"],
)
