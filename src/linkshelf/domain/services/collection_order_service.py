"""Per-user ordering of collections in the sidebar."""

from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.core.logging import get_logger
from linkshelf.infrastructure.persistence.database import session_lock
from linkshelf.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)


class CollectionOrderService:
    """Maintains ``users.collection_order``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)

    async def remove_id(self, user_id: int, collection_id: int) -> None:
        """Remove a collection id from a user's ordering.

        Remaining ids keep their relative order. Removing an id that is not
        present, or for an unknown user, is a no-op.
        """
        async with session_lock(self.session):
            current = await self.user_repo.get_collection_order(user_id)
            if current is None:
                return

            filtered = [cid for cid in current if cid != collection_id]
            await self.user_repo.set_collection_order(user_id, filtered)

        logger.debug(
            "Collection removed from order",
            user_id=user_id,
            collection_id=collection_id,
            removed=len(current) - len(filtered),
        )
