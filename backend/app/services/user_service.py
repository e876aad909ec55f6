"""User registry service."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import EntityType
from app.core.exceptions import NotFoundError
from app.models.domain.user import User
from app.repositories.user_repository import UserRepository


class UserService:
    """Service for registering and looking up users."""

    def __init__(self, db: AsyncSession):
        """
        Initialize the user service.

        Args:
            db: Async database session
        """
        self.db = db
        self.repo = UserRepository(db)

    async def create_user(self, name: str, email: str, is_adult: bool = False) -> User:
        """
        Register a new user.

        Args:
            name: Display name
            email: Unique contact email
            is_adult: Whether the user may rent adults-only movies

        Returns:
            The created user

        Raises:
            ValueError: If the email is already registered
        """
        if await self.repo.get_by_email(email):
            raise ValueError(f"A user with email {email} already exists")

        user = await self.repo.create(name=name, email=email, is_adult=is_adult)
        await self.db.commit()
        return user

    async def get_user(self, user_id: int) -> User:
        """
        Retrieve a user by ID.

        Args:
            user_id: ID of the user

        Returns:
            The user

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(EntityType.USER, user_id)
        return user
