"""Repository for collection database operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.infrastructure.persistence.models import CollectionModel


class CollectionRepository:
    """Repository for collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: CollectionModel) -> CollectionModel:
        self.session.add(collection)
        await self.session.flush()
        return collection

    async def get_by_id(self, collection_id: int) -> CollectionModel | None:
        """Get a collection by ID.

        Returns:
            Collection model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CollectionModel).where(CollectionModel.id == collection_id)
        )
        return result.scalar_one_or_none()

    async def list_child_ids(self, parent_id: int) -> list[int]:
        """Get the ids of the direct children of a collection, ascending."""
        result = await self.session.execute(
            select(CollectionModel.id)
            .where(CollectionModel.parent_id == parent_id)
            .order_by(CollectionModel.id)
        )
        return list(result.scalars().all())

    async def delete(self, collection: CollectionModel) -> None:
        """Delete a loaded collection."""
        await self.session.delete(collection)
        await self.session.flush()

    async def delete_by_id(self, collection_id: int) -> int:
        """Delete a collection row by id.

        Returns:
            Number of rows deleted.
        """
        result = await self.session.execute(
            delete(CollectionModel).where(CollectionModel.id == collection_id)
        )
        await self.session.flush()
        return result.rowcount
