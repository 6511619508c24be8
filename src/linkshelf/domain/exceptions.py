"""Exceptions raised by Linkshelf domain services and their collaborators."""


class LinkshelfError(Exception):
    """Base exception for Linkshelf errors."""

    pass


class MembershipNotFoundError(LinkshelfError):
    """Raised when a user leaves a collection they are not a member of."""

    def __init__(self, user_id: int, collection_id: int) -> None:
        self.user_id = user_id
        self.collection_id = collection_id
        super().__init__(
            f"No membership for user {user_id} in collection {collection_id}"
        )


class CollectionNotFoundError(LinkshelfError):
    """Raised when a collection disappears while it is being deleted."""

    def __init__(self, collection_id: int) -> None:
        self.collection_id = collection_id
        super().__init__(f"Collection not found: {collection_id}")


class AssetStoreError(LinkshelfError):
    """Raised when an asset folder cannot be removed."""

    pass


class SearchIndexError(LinkshelfError):
    """Raised when the search index rejects a request or is unreachable."""

    pass
