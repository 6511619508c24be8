"""SQLAlchemy models for Linkshelf tables.

All models inherit from the Base class defined in database.py.
"""

from linkshelf.infrastructure.persistence.models.collection import CollectionModel
from linkshelf.infrastructure.persistence.models.dashboard_section import (
    DashboardSectionModel,
    DashboardSectionType,
)
from linkshelf.infrastructure.persistence.models.link import LinkModel
from linkshelf.infrastructure.persistence.models.user import UserModel
from linkshelf.infrastructure.persistence.models.users_and_collections import (
    UsersAndCollectionsModel,
)

__all__ = [
    "CollectionModel",
    "DashboardSectionModel",
    "DashboardSectionType",
    "LinkModel",
    "UserModel",
    "UsersAndCollectionsModel",
]
