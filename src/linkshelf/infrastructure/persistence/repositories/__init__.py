"""Persistence repositories for database operations."""

from linkshelf.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from linkshelf.infrastructure.persistence.repositories.dashboard_section_repository import (
    DashboardSectionRepository,
)
from linkshelf.infrastructure.persistence.repositories.link_repository import (
    LinkRepository,
)
from linkshelf.infrastructure.persistence.repositories.membership_repository import (
    MembershipRepository,
)
from linkshelf.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "CollectionRepository",
    "DashboardSectionRepository",
    "LinkRepository",
    "MembershipRepository",
    "UserRepository",
]
