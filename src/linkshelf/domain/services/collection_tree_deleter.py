"""Bottom-up deletion of a collection subtree."""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.core.config import Settings, get_settings
from linkshelf.core.logging import get_logger
from linkshelf.infrastructure.persistence.repositories import (
    CollectionRepository,
    LinkRepository,
    MembershipRepository,
)
from linkshelf.infrastructure.search import SearchIndex
from linkshelf.infrastructure.storage import AssetStore, collection_asset_folders

logger = get_logger(__name__)


class CollectionTreeDeleter:
    """Deletes every descendant of a collection, children before parents.

    The traversal uses an explicit stack, so arbitrarily deep hierarchies do
    not grow the call stack. Descendants are visited in the same order as a
    depth-first recursion over children sorted by id.

    Each descendant is removed in this order:
        1. membership rows
        2. link ids from the search index
        3. link rows
        4. the collection row
        5. archive and preview asset folders

    The root itself is left untouched; removing it is the caller's job.
    """

    def __init__(
        self,
        session: AsyncSession,
        asset_store: AssetStore,
        search_index: SearchIndex | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.collection_repo = CollectionRepository(session)
        self.membership_repo = MembershipRepository(session)
        self.link_repo = LinkRepository(session)
        self.asset_store = asset_store
        self.search_index = search_index
        self.settings = settings or get_settings()

    async def delete_subtree(self, collection_id: int) -> None:
        """Delete all descendants of *collection_id*, excluding itself."""
        # (collection id, children already pushed)
        stack: list[tuple[int, bool]] = [
            (child_id, False)
            for child_id in reversed(await self.collection_repo.list_child_ids(collection_id))
        ]
        deleted = 0

        while stack:
            current_id, expanded = stack.pop()
            if expanded:
                await self._delete_node(current_id)
                deleted += 1
                continue

            stack.append((current_id, True))
            children = await self.collection_repo.list_child_ids(current_id)
            stack.extend((child_id, False) for child_id in reversed(children))

        if deleted:
            logger.info(
                "Collection subtree deleted",
                collection_id=collection_id,
                descendants=deleted,
            )

    async def unindex_links(self, link_ids: Sequence[int]) -> None:
        """Remove link ids from the search index, if one is configured."""
        if self.search_index is None:
            return
        await self.search_index.delete_documents(link_ids)

    async def remove_asset_folders(self, collection_id: int) -> None:
        for folder in collection_asset_folders(collection_id, self.settings):
            await self.asset_store.remove_folder(folder)

    async def _delete_node(self, collection_id: int) -> None:
        await self.membership_repo.delete_for_collection(collection_id)

        link_ids = await self.link_repo.list_ids_in_collection(collection_id)
        await self.unindex_links(link_ids)
        await self.link_repo.delete_in_collection(collection_id)

        await self.collection_repo.delete_by_id(collection_id)
        await self.remove_asset_folders(collection_id)

        logger.debug(
            "Descendant collection deleted",
            collection_id=collection_id,
            links=len(link_ids),
        )
