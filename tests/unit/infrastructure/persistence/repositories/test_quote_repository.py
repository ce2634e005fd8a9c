"""Tests for QuoteRepository against an in-memory database."""

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from quoteforge.infrastructure.persistence.models import QuoteCollectionModel, QuoteModel
from quoteforge.infrastructure.persistence.repositories import QuoteRepository


@pytest_asyncio.fixture
async def collections(db_session):
    db_session.add_all(
        [
            QuoteCollectionModel(id="c-alice", user_id="alice", name="Motivation"),
            QuoteCollectionModel(id="c-alice-2", user_id="alice", name="Calm"),
            QuoteCollectionModel(id="c-bob", user_id="bob", name="Bob's"),
        ]
    )
    await db_session.flush()


@pytest.fixture
def repository(db_session):
    return QuoteRepository(db_session)


def _quote(quote_id, collection_id="c-alice", user_id="alice", **kwargs):
    return QuoteModel(
        id=quote_id,
        collection_id=collection_id,
        user_id=user_id,
        text=kwargs.pop("text", "Keep going"),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_create_and_get_in_collection(repository, collections):
    await repository.create(_quote("q1", mood="determined"))

    found = await repository.get_in_collection("q1", "c-alice")

    assert found is not None
    assert found.mood == "determined"
    assert found.is_favorite is False
    assert found.is_public is False


@pytest.mark.asyncio
async def test_get_in_other_collection_is_none(repository, collections):
    await repository.create(_quote("q1"))

    assert await repository.get_in_collection("q1", "c-alice-2") is None


@pytest.mark.asyncio
async def test_create_requires_existing_collection(repository, collections):
    with pytest.raises(IntegrityError):
        await repository.create(_quote("q1", collection_id="missing"))


@pytest.mark.asyncio
async def test_list_in_collection_scopes_by_collection_and_user(repository, collections):
    await repository.create(_quote("q1"))
    await repository.create(_quote("q2", collection_id="c-alice-2"))
    await repository.create(_quote("q3", collection_id="c-bob", user_id="bob"))

    quotes = await repository.list_in_collection("c-alice", "alice")

    assert [q.id for q in quotes] == ["q1"]


@pytest.mark.asyncio
async def test_list_favorites_only(repository, collections):
    await repository.create(_quote("q1", is_favorite=True))
    await repository.create(_quote("q2", is_favorite=False))

    quotes = await repository.list_in_collection("c-alice", "alice", favorites_only=True)

    assert [q.id for q in quotes] == ["q1"]


@pytest.mark.asyncio
async def test_update_in_collection_changes_only_given_columns(repository, collections):
    await repository.create(_quote("q1", attributed_to="Astra", tags="grit"))

    updated = await repository.update_in_collection("q1", "c-alice", "alice", {"mood": "calm"})

    assert updated is not None
    assert updated.mood == "calm"
    assert updated.attributed_to == "Astra"
    assert updated.tags == "grit"
    assert updated.text == "Keep going"


@pytest.mark.asyncio
async def test_update_with_wrong_owner_matches_nothing(repository, collections):
    await repository.create(_quote("q1"))

    updated = await repository.update_in_collection("q1", "c-alice", "bob", {"text": "Mine"})

    assert updated is None
    unchanged = await repository.get_in_collection("q1", "c-alice")
    assert unchanged.text == "Keep going"


@pytest.mark.asyncio
async def test_delete_in_collection(repository, collections):
    await repository.create(_quote("q1"))

    assert await repository.delete_in_collection("q1", "c-alice", "alice") is True
    assert await repository.get_in_collection("q1", "c-alice") is None


@pytest.mark.asyncio
async def test_delete_with_mismatched_collection_keeps_quote(repository, collections):
    await repository.create(_quote("q1"))

    assert await repository.delete_in_collection("q1", "c-alice-2", "alice") is False
    assert await repository.get_in_collection("q1", "c-alice") is not None
