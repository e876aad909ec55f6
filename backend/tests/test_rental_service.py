"""Unit tests for RentalService with the storage layer mocked out."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.core.exceptions import (
    InsufficientAgeError,
    MovieUnavailableError,
    NotFoundError,
    PendingRentalError,
)
from app.models.domain import Movie, Rental, User
from app.services.rental_service import RentalService


def _user(is_adult: bool = True) -> User:
    return User(id=1, name="Maria Silva", email="maria@example.com", is_adult=is_adult)


def _movie(id: int = 1, adults_only: bool = False, rental_id: int | None = None) -> Movie:
    return Movie(id=id, name="Crazy Adventure", adults_only=adults_only, rental_id=rental_id)


def _rental(id: int = 1, user_id: int = 1, closed: bool = False) -> Rental:
    now = datetime.now(timezone.utc)
    return Rental(id=id, user_id=user_id, date=now, end_date=now + timedelta(days=3), closed=closed)


@pytest.fixture
def repos():
    return SimpleNamespace(user=AsyncMock(), movie=AsyncMock(), rental=AsyncMock())


@pytest.fixture
def db():
    return AsyncMock()


@pytest.fixture
def service(db, repos):
    return RentalService(
        db,
        user_repo=repos.user,
        movie_repo=repos.movie,
        rental_repo=repos.rental,
        rental_duration=timedelta(days=3),
    )


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_rentals_returns_all_rentals(service, repos):
    repos.rental.get_rentals.return_value = [_rental(1), _rental(2)]

    rentals = await service.get_rentals()

    assert len(rentals) == 2


@pytest.mark.asyncio
async def test_get_rental_by_id_returns_rental_with_movies(service, repos):
    rental = SimpleNamespace(id=1, closed=False, movies=[_movie(rental_id=1, adults_only=True)])
    repos.rental.get_by_id_with_movies.return_value = rental

    assert await service.get_rental_by_id(1) is rental


@pytest.mark.asyncio
async def test_get_rental_by_id_raises_when_missing(service, repos):
    repos.rental.get_by_id_with_movies.return_value = None

    with pytest.raises(NotFoundError) as exc:
        await service.get_rental_by_id(1)
    assert exc.value.message == "Rental not found."


# ---------------------------------------------------------------------------
# create_rental
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_rental_fails_when_user_does_not_exist(service, repos, db):
    repos.user.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc:
        await service.create_rental(1, [1, 2, 3])

    assert exc.value.message == "User not found."
    repos.user.get_by_id.assert_awaited_once_with(1)
    repos.rental.create_rental.assert_not_awaited()
    db.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_rental_fails_when_user_has_open_rental(service, repos):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = [_rental(closed=False)]

    with pytest.raises(PendingRentalError):
        await service.create_rental(1, [1, 2, 3])

    repos.movie.get_by_id.assert_not_awaited()
    repos.rental.create_rental.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_rental_ignores_closed_rentals(service, repos):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = [_rental(id=7, closed=True)]
    repos.movie.get_by_id.return_value = _movie()

    await service.create_rental(1, [1])

    repos.rental.create_rental.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_rental_fails_when_minor_requests_adults_only_movie(service, repos):
    repos.user.get_by_id.return_value = _user(is_adult=False)
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = _movie(adults_only=True)

    with pytest.raises(InsufficientAgeError) as exc:
        await service.create_rental(1, [1])

    assert exc.value.message == "Cannot see that movie."
    repos.rental.create_rental.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_rental_checks_age_before_availability(service, repos):
    repos.user.get_by_id.return_value = _user(is_adult=False)
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = _movie(adults_only=True, rental_id=2)

    with pytest.raises(InsufficientAgeError):
        await service.create_rental(1, [1])


@pytest.mark.asyncio
async def test_create_rental_fails_when_movie_does_not_exist(service, repos):
    repos.user.get_by_id.return_value = _user(is_adult=False)
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc:
        await service.create_rental(1, [1])

    assert exc.value.message == "Movie not found."


@pytest.mark.asyncio
async def test_create_rental_fails_when_movie_is_in_a_rental(service, repos):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = _movie(adults_only=True, rental_id=2)

    with pytest.raises(MovieUnavailableError) as exc:
        await service.create_rental(1, [1])

    assert exc.value.message == "Movie already in a rental."
    repos.rental.create_rental.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_rental_checks_movies_in_requested_order(service, repos):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.side_effect = [_movie(id=5, rental_id=9), None]

    with pytest.raises(MovieUnavailableError) as exc:
        await service.create_rental(1, [5, 6])

    assert exc.value.details == {"movie_id": 5}
    repos.movie.get_by_id.assert_awaited_once_with(5)


@pytest.mark.asyncio
async def test_create_rental_requires_movies(service, repos):
    with pytest.raises(ValueError):
        await service.create_rental(1, [])

    repos.user.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_rental_for_a_movie(service, repos, db):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = _movie(adults_only=True)
    created = _rental(id=10)
    repos.rental.create_rental.return_value = created

    rental = await service.create_rental(1, [1])

    assert rental is created
    db.commit.assert_awaited_once()
    kwargs = repos.rental.create_rental.await_args.kwargs
    assert kwargs["user_id"] == 1
    assert kwargs["movie_ids"] == [1]
    assert kwargs["end_date"] - kwargs["rented_at"] == timedelta(days=3)


@pytest.mark.asyncio
async def test_create_rental_looks_up_repeated_movie_once(service, repos):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = _movie(id=3)

    await service.create_rental(1, [3, 3])

    repos.movie.get_by_id.assert_awaited_once_with(3)
    assert repos.rental.create_rental.await_args.kwargs["movie_ids"] == [3]


@pytest.mark.asyncio
async def test_create_rental_rolls_back_when_write_loses_race(service, repos, db):
    repos.user.get_by_id.return_value = _user()
    repos.rental.get_by_user_id.return_value = []
    repos.movie.get_by_id.return_value = _movie()
    repos.rental.create_rental.side_effect = MovieUnavailableError(1)

    with pytest.raises(MovieUnavailableError):
        await service.create_rental(1, [1])

    db.rollback.assert_awaited_once()
    db.commit.assert_not_awaited()


# ---------------------------------------------------------------------------
# finish_rental
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_finish_rental_fails_when_rental_does_not_exist(service, repos):
    repos.rental.get_by_id_with_movies.return_value = None

    with pytest.raises(NotFoundError) as exc:
        await service.finish_rental(1)

    assert exc.value.message == "Rental not found."
    repos.rental.finish_rental.assert_not_awaited()


@pytest.mark.asyncio
async def test_finish_rental(service, repos, db):
    repos.rental.get_by_id_with_movies.return_value = SimpleNamespace(
        id=1, closed=False, movies=[_movie(rental_id=1, adults_only=True)]
    )

    await service.finish_rental(1)

    repos.rental.finish_rental.assert_awaited_once_with(1)
    db.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_finish_rental_is_a_no_op_when_already_closed(service, repos, db):
    repos.rental.get_by_id_with_movies.return_value = SimpleNamespace(id=1, closed=True, movies=[])

    await service.finish_rental(1)

    repos.rental.finish_rental.assert_not_awaited()
    db.commit.assert_not_awaited()
