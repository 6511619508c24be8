"""SQLAlchemy model for the users_and_collections junction table.

A row grants a user access to a collection they do not own.
"""

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from linkshelf.infrastructure.persistence.database import Base
from linkshelf.infrastructure.persistence.models._timestamps import TimestampMixin


class UsersAndCollectionsModel(TimestampMixin, Base):
    """Membership of a user in a shared collection.

    Attributes:
        user_id: Foreign key to users table.
        collection_id: Foreign key to collections table.
        can_create: Member may add links.
        can_update: Member may edit links.
        can_delete: Member may delete links.
    """

    __tablename__ = "users_and_collections"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id"),
        primary_key=True,
        index=True,
    )
    can_create: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_update: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_delete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return (
            f"<UsersAndCollections(user_id={self.user_id}, "
            f"collection_id={self.collection_id})>"
        )
