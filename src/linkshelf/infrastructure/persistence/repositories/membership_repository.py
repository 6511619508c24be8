"""Repository for users_and_collections membership rows."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.infrastructure.persistence.models import UsersAndCollectionsModel


class MembershipRepository:
    """Repository for collection membership operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def add(self, membership: UsersAndCollectionsModel) -> UsersAndCollectionsModel:
        self.session.add(membership)
        await self.session.flush()
        return membership

    async def get(self, user_id: int, collection_id: int) -> UsersAndCollectionsModel | None:
        """Get the membership of a user in a collection, if any."""
        result = await self.session.execute(
            select(UsersAndCollectionsModel).where(
                (UsersAndCollectionsModel.user_id == user_id)
                & (UsersAndCollectionsModel.collection_id == collection_id)
            )
        )
        return result.scalar_one_or_none()

    async def list_member_ids(self, collection_id: int) -> list[int]:
        """Get the ids of every member of a collection."""
        result = await self.session.execute(
            select(UsersAndCollectionsModel.user_id).where(
                UsersAndCollectionsModel.collection_id == collection_id
            )
        )
        return list(result.scalars().all())

    async def delete(self, membership: UsersAndCollectionsModel) -> None:
        """Delete a loaded membership row."""
        await self.session.delete(membership)
        await self.session.flush()

    async def delete_for_collection(self, collection_id: int) -> int:
        """Delete every membership of a collection.

        Returns:
            Number of rows deleted.
        """
        result = await self.session.execute(
            delete(UsersAndCollectionsModel).where(
                UsersAndCollectionsModel.collection_id == collection_id
            )
        )
        await self.session.flush()
        return result.rowcount
