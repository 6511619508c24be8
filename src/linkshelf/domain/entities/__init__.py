"""Domain entities for collection access and deletion results."""

from linkshelf.domain.entities.collection_access import (
    AccessRole,
    CollectionAccess,
    resolve_access_role,
)
from linkshelf.domain.entities.deletion_outcome import (
    INVALID_COLLECTION_MESSAGE,
    NOT_ACCESSIBLE_MESSAGE,
    DeletionOutcome,
)

__all__ = [
    "AccessRole",
    "CollectionAccess",
    "DeletionOutcome",
    "INVALID_COLLECTION_MESSAGE",
    "NOT_ACCESSIBLE_MESSAGE",
    "resolve_access_role",
]
