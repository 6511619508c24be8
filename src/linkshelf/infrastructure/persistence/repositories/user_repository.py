"""Repository for user database operations."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.infrastructure.persistence.models import UserModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: UserModel) -> UserModel:
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_collection_order(self, user_id: int) -> list[int] | None:
        """Get the user's ordered collection ids.

        Returns:
            The ordered ids, or None if the user does not exist.
        """
        result = await self.session.execute(
            select(UserModel.collection_order).where(UserModel.id == user_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return list(row.collection_order or [])

    async def set_collection_order(self, user_id: int, collection_order: list[int]) -> None:
        """Replace the user's ordered collection ids as a whole."""
        await self.session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(collection_order=list(collection_order))
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
