"""Pytest configuration for all tests."""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from linkshelf.core.config import Settings
from linkshelf.infrastructure.persistence.database import Base, enable_sqlite_foreign_keys
from linkshelf.infrastructure.persistence.models import (
    CollectionModel,
    DashboardSectionModel,
    DashboardSectionType,
    LinkModel,
    UserModel,
    UsersAndCollectionsModel,
)
from linkshelf.infrastructure.search import SearchIndex
from linkshelf.infrastructure.storage import AssetStore


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing with foreign keys enforced.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="testing",
        storage_path=str(tmp_path / "files"),
        search_url="",
    )


@pytest.fixture
def asset_store() -> AsyncMock:
    return AsyncMock(spec=AssetStore)


@pytest.fixture
def search_index() -> AsyncMock:
    return AsyncMock(spec=SearchIndex)


class Seeder:
    """Creates committed rows for tests."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _save(self, obj):
        self.session.add(obj)
        await self.session.commit()
        return obj

    async def user(self, username: str, collection_order: list[int] | None = None) -> UserModel:
        return await self._save(
            UserModel(username=username, collection_order=list(collection_order or []))
        )

    async def collection(
        self, owner: UserModel, name: str, parent: CollectionModel | None = None
    ) -> CollectionModel:
        return await self._save(
            CollectionModel(
                name=name,
                owner_id=owner.id,
                parent_id=parent.id if parent is not None else None,
            )
        )

    async def link(self, collection: CollectionModel, index_version: int | None = 1) -> LinkModel:
        return await self._save(
            LinkModel(
                name=f"link in {collection.name}",
                url="https://example.com",
                collection_id=collection.id,
                index_version=index_version,
            )
        )

    async def membership(
        self, user: UserModel, collection: CollectionModel
    ) -> UsersAndCollectionsModel:
        return await self._save(
            UsersAndCollectionsModel(user_id=user.id, collection_id=collection.id)
        )

    async def section(
        self,
        user: UserModel,
        order: int,
        collection: CollectionModel | None = None,
    ) -> DashboardSectionModel:
        section_type = (
            DashboardSectionType.COLLECTION if collection is not None
            else DashboardSectionType.RECENT_LINKS
        )
        return await self._save(
            DashboardSectionModel(
                user_id=user.id,
                collection_id=collection.id if collection is not None else None,
                type=section_type.value,
                order=order,
            )
        )


@pytest.fixture
def seed(db_session: AsyncSession) -> Seeder:
    return Seeder(db_session)


async def count_rows(session: AsyncSession, model, *criteria) -> int:
    result = await session.execute(select(func.count()).select_from(model).where(*criteria))
    return result.scalar_one()


async def collection_order_of(session: AsyncSession, user_id: int) -> list[int]:
    result = await session.execute(
        select(UserModel.collection_order).where(UserModel.id == user_id)
    )
    return list(result.scalar_one())


async def section_orders_of(session: AsyncSession, user_id: int) -> list[tuple[int | None, int]]:
    """(collection_id, order) pairs of a user's sections by ascending order."""
    result = await session.execute(
        select(DashboardSectionModel.collection_id, DashboardSectionModel.order)
        .where(DashboardSectionModel.user_id == user_id)
        .order_by(DashboardSectionModel.order)
    )
    return [tuple(row) for row in result.all()]


@pytest.fixture
def db_helpers():
    """Query helpers that read column values straight from the database."""

    class _Helpers:
        count_rows = staticmethod(count_rows)
        collection_order_of = staticmethod(collection_order_of)
        section_orders_of = staticmethod(section_orders_of)

    return _Helpers
