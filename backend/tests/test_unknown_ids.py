"""RentalService against SQLite with IDs that cannot exist in the key columns."""

from __future__ import annotations

import pytest

from app.core.enums import EntityType
from app.core.exceptions import NotFoundError
from app.services.rental_service import RentalService

HUGE_ID = 2**63


@pytest.mark.asyncio
async def test_get_rental_by_huge_id_is_not_found(db):
    with pytest.raises(NotFoundError) as exc:
        await RentalService(db).get_rental_by_id(HUGE_ID)

    assert exc.value == NotFoundError(EntityType.RENTAL)


@pytest.mark.asyncio
async def test_finish_rental_with_huge_id_is_not_found(db):
    with pytest.raises(NotFoundError) as exc:
        await RentalService(db).finish_rental(HUGE_ID)

    assert exc.value == NotFoundError(EntityType.RENTAL)


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [0, HUGE_ID])
async def test_create_rental_for_unknown_user_id_is_not_found(db, make_movie, user_id):
    movie_id = (await make_movie()).id

    with pytest.raises(NotFoundError) as exc:
        await RentalService(db).create_rental(user_id, [movie_id])

    assert exc.value == NotFoundError(EntityType.USER)


@pytest.mark.asyncio
async def test_create_rental_with_huge_movie_id_is_not_found(db, make_user, make_movie):
    user_id = (await make_user()).id
    movie_id = (await make_movie()).id
    service = RentalService(db)

    with pytest.raises(NotFoundError) as exc:
        await service.create_rental(user_id, [movie_id, HUGE_ID])

    assert exc.value == NotFoundError(EntityType.MOVIE)
    assert await service.get_rentals() == []
