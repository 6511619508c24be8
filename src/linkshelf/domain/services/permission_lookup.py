"""Owner/member lookup for collections."""

from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.domain.entities import CollectionAccess
from linkshelf.infrastructure.persistence.repositories import (
    CollectionRepository,
    MembershipRepository,
)


class CollectionPermissionLookup:
    """Resolves whether a user has any relationship to a collection."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the lookup.

        Args:
            session: Database session for querying collections and memberships.
        """
        self.collection_repo = CollectionRepository(session)
        self.membership_repo = MembershipRepository(session)

    async def get_permission(self, user_id: int, collection_id: int) -> CollectionAccess | None:
        """Get the owner and members of a collection the user can see.

        Returns:
            The collection's access snapshot when *user_id* owns it or is a
            member of it, None otherwise (including when it does not exist).
        """
        collection = await self.collection_repo.get_by_id(collection_id)
        if collection is None:
            return None

        member_ids = frozenset(await self.membership_repo.list_member_ids(collection_id))
        if collection.owner_id != user_id and user_id not in member_ids:
            return None

        return CollectionAccess(
            collection_id=collection.id,
            owner_id=collection.owner_id,
            member_ids=member_ids,
        )
