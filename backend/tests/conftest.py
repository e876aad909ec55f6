"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • engine / session_factory / db: in-memory SQLite database with all tables
  • make_user(...), make_movie(...): persist users and movies in `db`
"""

from __future__ import annotations

import os

# Settings are read at import time; point them at a throwaway database first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from itertools import count

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.session import create_session_factory, create_tables
from app.models.domain import Movie, User


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

_emails = count(1)


@pytest.fixture
def make_user(db):
    async def _factory(is_adult: bool = True, name: str = "Maria Silva") -> User:
        user = User(name=name, email=f"user{next(_emails)}@example.com", is_adult=is_adult)
        db.add(user)
        await db.commit()
        return user
    return _factory


@pytest.fixture
def make_movie(db):
    async def _factory(
        adults_only: bool = False,
        name: str = "Crazy Adventure",
        rental_id: int | None = None,
    ) -> Movie:
        movie = Movie(name=name, adults_only=adults_only, rental_id=rental_id)
        db.add(movie)
        await db.commit()
        return movie
    return _factory
