"""SQLAlchemy model for the users table."""

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from linkshelf.infrastructure.persistence.database import Base
from linkshelf.infrastructure.persistence.models._timestamps import TimestampMixin


class UserModel(TimestampMixin, Base):
    """SQLAlchemy model for the users table.

    Attributes:
        id: Primary key.
        username: Unique login name.
        collection_order: Ordered collection ids shown in the user's sidebar.
            Ids are weak references and are removed when the collection is
            deleted or left.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
    )
    collection_order: Mapped[list[int]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered collection ids for sidebar ordering",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
