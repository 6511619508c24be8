"""Per-user dashboard layout maintenance.

A user's dashboard sections carry dense ``order`` values. Removing a section
shifts every later section down by one so no gap is left behind.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.core.logging import get_logger
from linkshelf.infrastructure.persistence.database import session_lock
from linkshelf.infrastructure.persistence.repositories import DashboardSectionRepository

logger = get_logger(__name__)


class DashboardLayoutService:
    """Removes collection sections from dashboards and compacts the order."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session. The removal joins the session's
                transaction; the caller commits or rolls back.
        """
        self.session = session
        self.section_repo = DashboardSectionRepository(session)

    async def remove_section(self, user_id: int, collection_id: int) -> None:
        """Remove the user's section bound to a collection, if there is one.

        The delete and the compaction run back to back under the session
        lock and inside the same transaction, so either both are committed
        or neither is.
        """
        async with session_lock(self.session):
            section = await self.section_repo.find_for_collection(user_id, collection_id)
            if section is None:
                return

            removed_order = section.order
            await self.section_repo.delete(section)
            shifted = await self.section_repo.shift_down_after(user_id, removed_order)

        logger.debug(
            "Dashboard section removed",
            user_id=user_id,
            collection_id=collection_id,
            order=removed_order,
            shifted=shifted,
        )
