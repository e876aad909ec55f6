from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import BaseModel

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=BaseModel)

# Primary and foreign keys are 32-bit INTEGER columns
MAX_ID = 2**31 - 1


def is_storable_id(id: int) -> bool:
    """Whether an ID fits the integer key columns; other IDs cannot exist."""
    return 1 <= id <= MAX_ID


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common lookups and inserts.

    Repositories only flush; committing or rolling back is left to the
    service that owns the session, so several repository calls can form
    one unit of work.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new entity.

        Args:
            **kwargs: Field values for the new entity

        Returns:
            The created entity with generated ID
        """
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Retrieve an entity by its ID.

        Args:
            id: The integer ID of the entity

        Returns:
            The entity if found, None otherwise
        """
        if not is_storable_id(id):
            return None

        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self, order_by: Optional[Any] = None) -> List[ModelType]:
        """
        Retrieve all entities, ordered by ID unless told otherwise.

        Args:
            order_by: Optional ordering clause

        Returns:
            List of entities
        """
        stmt = select(self.model).order_by(
            order_by if order_by is not None else self.model.id
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_by(self, **filters: Any) -> List[ModelType]:
        """
        Find entities matching the given field filters.

        Args:
            **filters: Field equality filters (e.g., closed=False)

        Returns:
            List of matching entities
        """
        stmt = select(self.model).order_by(self.model.id)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())
