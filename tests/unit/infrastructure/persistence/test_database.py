"""Tests for the database manager and session helpers."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from linkshelf.infrastructure.persistence.database import DatabaseManager, session_lock
from linkshelf.infrastructure.persistence.models import LinkModel


@pytest.mark.asyncio
async def test_manager_lifecycle():
    db = DatabaseManager("sqlite+aiosqlite:///:memory:")

    assert await db.check_connection() is True
    async with db.session() as session:
        assert session.bind is db.engine

    await db.disconnect()
    assert db._engine is None


@pytest.mark.asyncio
async def test_session_block_failure_is_reraised():
    db = DatabaseManager("sqlite+aiosqlite:///:memory:")

    with pytest.raises(RuntimeError, match="boom"):
        async with db.session():
            raise RuntimeError("boom")

    await db.disconnect()


@pytest.mark.asyncio
async def test_sqlite_foreign_keys_are_enforced(db_session):
    db_session.add(LinkModel(name="orphan", url="https://example.com", collection_id=404))

    with pytest.raises(IntegrityError):
        await db_session.flush()


@pytest.mark.asyncio
async def test_manager_enables_sqlite_foreign_keys():
    db = DatabaseManager("sqlite+aiosqlite:///:memory:")

    async with db.engine.connect() as conn:
        result = await conn.execute(text("PRAGMA foreign_keys"))
        assert result.scalar_one() == 1

    await db.disconnect()


@pytest.mark.asyncio
async def test_session_lock_is_shared_per_session(db_session):
    assert session_lock(db_session) is session_lock(db_session)
