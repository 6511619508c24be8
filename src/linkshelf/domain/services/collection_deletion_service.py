"""Remove-or-delete workflow for collections.

A member asking to remove a collection leaves it: their membership goes away
and the collection stays. The owner asking the same deletes it together with
its whole subtree, memberships, links, assets and search documents.
"""

from collections.abc import Awaitable
from typing import TypeVar

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.core.concurrency import run_concurrently
from linkshelf.core.config import Settings, get_settings
from linkshelf.core.logging import get_logger
from linkshelf.domain.entities import AccessRole, DeletionOutcome, resolve_access_role
from linkshelf.domain.exceptions import CollectionNotFoundError, MembershipNotFoundError
from linkshelf.domain.services.collection_order_service import CollectionOrderService
from linkshelf.domain.services.collection_tree_deleter import CollectionTreeDeleter
from linkshelf.domain.services.dashboard_layout_service import DashboardLayoutService
from linkshelf.domain.services.permission_lookup import CollectionPermissionLookup
from linkshelf.infrastructure.persistence.models import (
    CollectionModel,
    UsersAndCollectionsModel,
)
from linkshelf.infrastructure.persistence.repositories import (
    CollectionRepository,
    LinkRepository,
    MembershipRepository,
)
from linkshelf.infrastructure.search import SearchIndex
from linkshelf.infrastructure.storage import AssetStore

logger = get_logger(__name__)

T = TypeVar("T")


def is_valid_collection_id(collection_id: object) -> bool:
    return (
        isinstance(collection_id, int)
        and not isinstance(collection_id, bool)
        and collection_id > 0
    )


class CollectionDeletionService:
    """Entry point for removing a collection on behalf of a user.

    The service owns the session's transaction: each path commits on
    success and rolls back on any failure before re-raising.

    Asset folders and search documents are removed while the delete path's
    transaction is still open. They are not restored if the transaction is
    rolled back afterwards, which can leave search entries or asset folders
    missing for a collection that survived.
    """

    def __init__(
        self,
        session: AsyncSession,
        asset_store: AssetStore,
        search_index: SearchIndex | None = None,
        permission_lookup: CollectionPermissionLookup | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session.
            asset_store: Store holding archived files and previews.
            search_index: Link index, or None when search is disabled.
            permission_lookup: Owner/member lookup. Defaults to the
                database-backed lookup on *session*.
            settings: Application settings.
        """
        self.session = session
        self.settings = settings or get_settings()
        self.permission_lookup = permission_lookup or CollectionPermissionLookup(session)
        self.collection_repo = CollectionRepository(session)
        self.membership_repo = MembershipRepository(session)
        self.link_repo = LinkRepository(session)
        self.order_service = CollectionOrderService(session)
        self.dashboard_service = DashboardLayoutService(session)
        self.tree_deleter = CollectionTreeDeleter(
            session,
            asset_store=asset_store,
            search_index=search_index,
            settings=self.settings,
        )

    async def remove_or_delete_collection(
        self, user_id: int, collection_id: int | None
    ) -> DeletionOutcome:
        """Leave or delete a collection depending on the caller's role.

        Returns:
            The deleted membership (member) or collection (owner) with status
            200, or a message with status 401 when the id is invalid or the
            collection is not accessible.

        Raises:
            MembershipNotFoundError: The membership vanished before the
                member could leave.
            CollectionNotFoundError: The collection vanished before the owner
                could delete it.
        """
        if not is_valid_collection_id(collection_id):
            logger.info("Collection removal refused: invalid id", user_id=user_id)
            return DeletionOutcome.invalid_collection()

        with structlog.contextvars.bound_contextvars(
            user_id=user_id, collection_id=collection_id
        ):
            access = await self.permission_lookup.get_permission(user_id, collection_id)
            role = resolve_access_role(access, user_id)

            match role:
                case AccessRole.MEMBER:
                    membership = await self._in_transaction(
                        self._leave_collection(user_id, collection_id)
                    )
                    logger.info("Collection left")
                    return DeletionOutcome.success(membership)
                case AccessRole.OWNER:
                    collection = await self._in_transaction(
                        self._delete_collection(user_id, collection_id)
                    )
                    logger.info("Collection deleted")
                    return DeletionOutcome.success(collection)
                case _:
                    logger.info("Collection removal refused: not accessible")
                    return DeletionOutcome.not_accessible()

    async def _in_transaction(self, work: Awaitable[T]) -> T:
        try:
            result = await work
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return result

    async def _detach_from_user_views(self, user_id: int, collection_id: int) -> None:
        await run_concurrently(
            self.order_service.remove_id(user_id, collection_id),
            self.dashboard_service.remove_section(user_id, collection_id),
        )

    async def _leave_collection(
        self, user_id: int, collection_id: int
    ) -> UsersAndCollectionsModel:
        membership = await self.membership_repo.get(user_id, collection_id)
        if membership is None:
            raise MembershipNotFoundError(user_id, collection_id)
        await self.membership_repo.delete(membership)

        await self._detach_from_user_views(user_id, collection_id)

        # Links stay; only this member's indexed view of them is stale.
        stale = await self.link_repo.clear_index_version(collection_id)
        logger.debug("Links marked for re-indexing", links=stale)
        return membership

    async def _delete_collection(self, user_id: int, collection_id: int) -> CollectionModel:
        await self.tree_deleter.delete_subtree(collection_id)

        await self.membership_repo.delete_for_collection(collection_id)
        await self.tree_deleter.remove_asset_folders(collection_id)

        await self._detach_from_user_views(user_id, collection_id)

        link_ids = await self.link_repo.list_ids_in_collection(collection_id)
        await self.tree_deleter.unindex_links(link_ids)
        await self.link_repo.delete_in_collection(collection_id)

        collection = await self.collection_repo.get_by_id(collection_id)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        await self.collection_repo.delete(collection)
        return collection
