"""Tests for the ownership guards."""

from unittest.mock import AsyncMock

import pytest

from quoteforge.core.exceptions import NotFoundError
from quoteforge.domain.services import CollectionOwnershipGuard, OwnedResourceGuard
from quoteforge.infrastructure.persistence.models import QuoteCollectionModel


@pytest.mark.asyncio
async def test_generic_guard_returns_owned_resource():
    resource = object()
    repository = AsyncMock()
    repository.get_owned.return_value = resource
    guard = OwnedResourceGuard(repository, "Widget")

    assert await guard.require_owned("w1", "alice") is resource
    repository.get_owned.assert_awaited_once_with("w1", "alice")


@pytest.mark.asyncio
async def test_generic_guard_uses_resource_name_in_error():
    repository = AsyncMock()
    repository.get_owned.return_value = None
    guard = OwnedResourceGuard(repository, "Widget")

    with pytest.raises(NotFoundError, match="Widget not found."):
        await guard.require_owned("w1", "alice")


@pytest.mark.asyncio
async def test_collection_guard(db_session):
    db_session.add(QuoteCollectionModel(id="c1", user_id="alice", name="Motivation"))
    await db_session.flush()
    guard = CollectionOwnershipGuard(db_session)

    collection = await guard.require_owned_collection("c1", "alice")

    assert collection.id == "c1"


@pytest.mark.asyncio
async def test_foreign_and_missing_collections_fail_identically(db_session):
    db_session.add(QuoteCollectionModel(id="c1", user_id="alice", name="Motivation"))
    await db_session.flush()
    guard = CollectionOwnershipGuard(db_session)

    with pytest.raises(NotFoundError) as foreign:
        await guard.require_owned_collection("c1", "bob")
    with pytest.raises(NotFoundError) as missing:
        await guard.require_owned_collection("nope", "bob")

    assert foreign.value.message == missing.value.message == "Collection not found."
    assert foreign.value.code is missing.value.code
