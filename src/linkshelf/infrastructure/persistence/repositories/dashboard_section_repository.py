"""Repository for dashboard section database operations."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.infrastructure.persistence.models import DashboardSectionModel


class DashboardSectionRepository:
    """Repository for dashboard section database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, section: DashboardSectionModel) -> DashboardSectionModel:
        self.session.add(section)
        await self.session.flush()
        return section

    async def find_for_collection(
        self, user_id: int, collection_id: int
    ) -> DashboardSectionModel | None:
        """Get the first section of a user bound to a collection."""
        result = await self.session.execute(
            select(DashboardSectionModel)
            .where(
                (DashboardSectionModel.user_id == user_id)
                & (DashboardSectionModel.collection_id == collection_id)
            )
            .order_by(DashboardSectionModel.order)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def delete(self, section: DashboardSectionModel) -> None:
        await self.session.delete(section)
        await self.session.flush()

    async def shift_down_after(self, user_id: int, order: int) -> int:
        """Decrement the order of a user's sections placed after *order*.

        Returns:
            Number of rows updated.
        """
        result = await self.session.execute(
            update(DashboardSectionModel)
            .where(
                (DashboardSectionModel.user_id == user_id)
                & (DashboardSectionModel.order > order)
            )
            .values(order=DashboardSectionModel.order - 1)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount
