"""Unit tests for UserRepository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.infrastructure.persistence.repositories import UserRepository


@pytest.mark.asyncio
async def test_get_collection_order_unknown_user():
    session = AsyncMock(spec=AsyncSession)
    mock_result = MagicMock()
    mock_result.one_or_none.return_value = None
    session.execute.return_value = mock_result

    assert await UserRepository(session).get_collection_order(5) is None


@pytest.mark.asyncio
async def test_set_collection_order_replaces_list(db_session, seed, db_helpers):
    user = await seed.user("alice", collection_order=[1, 2, 3])

    await UserRepository(db_session).set_collection_order(user.id, [3, 1])

    assert await UserRepository(db_session).get_collection_order(user.id) == [3, 1]
    assert await db_helpers.collection_order_of(db_session, user.id) == [3, 1]
