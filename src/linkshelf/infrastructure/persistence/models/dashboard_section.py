"""SQLAlchemy model for the dashboard_sections table."""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from linkshelf.infrastructure.persistence.database import Base
from linkshelf.infrastructure.persistence.models._timestamps import TimestampMixin


class DashboardSectionType(str, Enum):
    COLLECTION = "COLLECTION"
    RECENT_LINKS = "RECENT_LINKS"
    PINNED_LINKS = "PINNED_LINKS"


class DashboardSectionModel(TimestampMixin, Base):
    """One section of a user's dashboard.

    ``order`` is dense per user: the sections of a user always carry
    consecutive values with no gaps.

    Attributes:
        id: Primary key.
        user_id: Owning user.
        collection_id: Collection shown by a COLLECTION section, None otherwise.
        type: Section kind.
        order: Position on the dashboard.
    """

    __tablename__ = "dashboard_sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    collection_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        nullable=True,
    )
    type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=DashboardSectionType.COLLECTION.value,
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<DashboardSection(id={self.id}, user_id={self.user_id}, "
            f"collection_id={self.collection_id}, order={self.order})>"
        )
