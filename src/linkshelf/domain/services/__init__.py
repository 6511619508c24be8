"""Domain services for Linkshelf.

Services implement the collection removal workflow on top of the
persistence repositories and the asset and search adapters.
"""

from linkshelf.domain.services.collection_deletion_service import (
    CollectionDeletionService,
    is_valid_collection_id,
)
from linkshelf.domain.services.collection_order_service import CollectionOrderService
from linkshelf.domain.services.collection_tree_deleter import CollectionTreeDeleter
from linkshelf.domain.services.dashboard_layout_service import DashboardLayoutService
from linkshelf.domain.services.permission_lookup import CollectionPermissionLookup

__all__ = [
    "CollectionDeletionService",
    "CollectionOrderService",
    "CollectionPermissionLookup",
    "CollectionTreeDeleter",
    "DashboardLayoutService",
    "is_valid_collection_id",
]
