"""SQLAlchemy model for the collections table.

Collections group links and nest into a tree through ``parent_id``.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from linkshelf.infrastructure.persistence.database import Base
from linkshelf.infrastructure.persistence.models._timestamps import TimestampMixin


class CollectionModel(TimestampMixin, Base):
    """SQLAlchemy model for the collections table.

    Attributes:
        id: Primary key.
        name: Display name.
        description: Optional free text.
        color: Hex colour shown in the sidebar.
        is_public: Whether the collection is readable without membership.
        owner_id: The user that created, and exclusively owns, the collection.
        parent_id: Parent collection, None for root collections. The parent
            chain is acyclic.
    """

    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="#0ea5e9")
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("collections.id"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name={self.name}, parent_id={self.parent_id})>"
