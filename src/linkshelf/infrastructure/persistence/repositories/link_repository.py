"""Repository for link database operations."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.infrastructure.persistence.models import LinkModel


class LinkRepository:
    """Repository for link database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, link: LinkModel) -> LinkModel:
        self.session.add(link)
        await self.session.flush()
        return link

    async def list_ids_in_collection(self, collection_id: int) -> list[int]:
        """Get the ids of the links owned by a collection, ascending."""
        result = await self.session.execute(
            select(LinkModel.id)
            .where(LinkModel.collection_id == collection_id)
            .order_by(LinkModel.id)
        )
        return list(result.scalars().all())

    async def delete_in_collection(self, collection_id: int) -> int:
        """Delete every link owned by a collection.

        Returns:
            Number of rows deleted.
        """
        result = await self.session.execute(
            delete(LinkModel).where(LinkModel.collection_id == collection_id)
        )
        await self.session.flush()
        return result.rowcount

    async def clear_index_version(self, collection_id: int) -> int:
        """Mark every link of a collection as needing re-indexing.

        Returns:
            Number of rows updated.
        """
        result = await self.session.execute(
            update(LinkModel)
            .where(LinkModel.collection_id == collection_id)
            .values(index_version=None)
        )
        await self.session.flush()
        return result.rowcount
