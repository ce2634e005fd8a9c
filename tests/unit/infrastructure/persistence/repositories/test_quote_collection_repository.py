"""Unit tests for QuoteCollectionRepository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.infrastructure.persistence.models import QuoteCollectionModel
from quoteforge.infrastructure.persistence.repositories import QuoteCollectionRepository


@pytest.fixture
def mock_session():
    """Create a mock database session."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
def repository(mock_session):
    return QuoteCollectionRepository(mock_session)


@pytest.mark.asyncio
async def test_create_adds_and_flushes(repository, mock_session):
    collection = QuoteCollectionModel(id="c1", user_id="alice", name="Motivation")

    result = await repository.create(collection)

    mock_session.add.assert_called_once_with(collection)
    mock_session.flush.assert_awaited_once()
    assert result is collection


@pytest.mark.asyncio
async def test_get_owned_filters_by_id_and_owner(repository, mock_session):
    expected = QuoteCollectionModel(id="c1", user_id="alice", name="Motivation")
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = expected
    mock_session.execute.return_value = mock_result

    found = await repository.get_owned("c1", "alice")

    assert found is expected
    stmt = mock_session.execute.call_args.args[0]
    sql = str(stmt)
    assert "quote_collections.id = :id_1" in sql
    assert "quote_collections.user_id = :user_id_1" in sql


@pytest.mark.asyncio
async def test_update_owned_returns_none_when_no_row_matches(repository, mock_session):
    mock_result = MagicMock()
    mock_result.rowcount = 0
    mock_session.execute.return_value = mock_result

    updated = await repository.update_owned("c1", "mallory", {"name": "Stolen"})

    assert updated is None
    # No follow-up select when nothing was updated.
    assert mock_session.execute.await_count == 1


@pytest.mark.asyncio
async def test_update_owned_filters_write_by_owner(repository, mock_session):
    mock_result = MagicMock()
    mock_result.rowcount = 0
    mock_session.execute.return_value = mock_result

    await repository.update_owned("c1", "alice", {"name": "New"})

    sql = str(mock_session.execute.call_args.args[0])
    assert sql.startswith("UPDATE quote_collections")
    assert "quote_collections.user_id = :user_id_1" in sql


@pytest.mark.asyncio
async def test_list_by_user(db_session):
    repository = QuoteCollectionRepository(db_session)
    await repository.create(QuoteCollectionModel(id="c1", user_id="alice", name="A"))
    await repository.create(QuoteCollectionModel(id="c2", user_id="bob", name="B"))
    await repository.create(QuoteCollectionModel(id="c3", user_id="alice", name="A"))

    collections = await repository.list_by_user("alice")

    assert {c.id for c in collections} == {"c1", "c3"}
