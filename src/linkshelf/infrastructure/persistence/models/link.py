"""SQLAlchemy model for the links table."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from linkshelf.infrastructure.persistence.database import Base
from linkshelf.infrastructure.persistence.models._timestamps import TimestampMixin


class LinkModel(TimestampMixin, Base):
    """A bookmarked link, owned by exactly one collection.

    Attributes:
        id: Primary key, also the document id in the search index.
        name: Display title.
        url: Bookmarked URL.
        collection_id: Owning collection.
        index_version: Search-index freshness marker. None means the link
            must be re-indexed.
    """

    __tablename__ = "links"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id"),
        nullable=False,
        index=True,
    )
    index_version: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Link(id={self.id}, collection_id={self.collection_id})>"
