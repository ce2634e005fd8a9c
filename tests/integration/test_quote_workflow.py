"""End-to-end walk through collections and quotes for two users."""

import pytest

COLLECTIONS = "/api/v1/collections"


@pytest.mark.asyncio
async def test_motivation_workflow(client, alice_headers, bob_headers):
    # Alice builds a collection and fills it.
    created = await client.post(COLLECTIONS, json={"name": "Motivation"}, headers=alice_headers)
    assert created.status_code == 201
    collection_id = created.json()["data"]["collection"]["id"]
    quotes_url = f"{COLLECTIONS}/{collection_id}/quotes"

    first = await client.post(
        quotes_url,
        json={"text": "Keep going", "mood": "determined", "isFavorite": True},
        headers=alice_headers,
    )
    second = await client.post(quotes_url, json={"text": "Breathe first"}, headers=alice_headers)
    assert first.status_code == second.status_code == 201
    keep_going = first.json()["data"]["quote"]
    breathe = second.json()["data"]["quote"]

    listed = (await client.get(quotes_url, headers=alice_headers)).json()["data"]
    assert listed["total"] == 2

    favorites = (
        await client.get(quotes_url, params={"favoritesOnly": True}, headers=alice_headers)
    ).json()["data"]
    assert [q["id"] for q in favorites["items"]] == [keep_going["id"]]

    # Bob can neither see nor touch any of it.
    assert (await client.get(quotes_url, headers=bob_headers)).status_code == 404
    stolen = await client.patch(
        f"{quotes_url}/{keep_going['id']}", json={"text": "Bob was here"}, headers=bob_headers
    )
    assert stolen.status_code == 404
    bob_collections = (await client.get(COLLECTIONS, headers=bob_headers)).json()["data"]
    assert bob_collections == {"items": [], "total": 0}

    # Alice refines and prunes.
    renamed = await client.patch(
        f"{COLLECTIONS}/{collection_id}",
        json={"name": "Keep going", "isDefault": True},
        headers=alice_headers,
    )
    assert renamed.json()["data"]["collection"]["isDefault"] is True

    calmer = await client.patch(
        f"{quotes_url}/{keep_going['id']}", json={"mood": "calm"}, headers=alice_headers
    )
    assert calmer.json()["data"]["quote"]["mood"] == "calm"
    assert calmer.json()["data"]["quote"]["text"] == "Keep going"

    removed = await client.delete(f"{quotes_url}/{breathe['id']}", headers=alice_headers)
    assert removed.json() == {"success": True}

    remaining = (await client.get(quotes_url, headers=alice_headers)).json()["data"]
    assert remaining["total"] == 1
    assert remaining["items"][0]["text"] == "Keep going"
    assert remaining["items"][0]["isFavorite"] is True


@pytest.mark.asyncio
async def test_favorite_then_delete_flow(client, alice_headers):
    created = await client.post(COLLECTIONS, json={"name": "Motivation"}, headers=alice_headers)
    collection_id = created.json()["data"]["collection"]["id"]
    quotes_url = f"{COLLECTIONS}/{collection_id}/quotes"

    response = await client.post(quotes_url, json={"text": "Keep going"}, headers=alice_headers)
    quote = response.json()["data"]["quote"]
    assert quote["isFavorite"] is False

    listed = (await client.get(quotes_url, headers=alice_headers)).json()["data"]
    assert listed["total"] == 1
    assert listed["items"][0]["isFavorite"] is False

    favorited = await client.patch(
        f"{quotes_url}/{quote['id']}", json={"isFavorite": True}, headers=alice_headers
    )
    assert favorited.status_code == 200
    assert favorited.json()["data"]["quote"]["isFavorite"] is True

    favorites = (
        await client.get(quotes_url, params={"favoritesOnly": "true"}, headers=alice_headers)
    ).json()["data"]
    assert favorites["total"] == 1
    assert [q["id"] for q in favorites["items"]] == [quote["id"]]

    deleted = await client.delete(f"{quotes_url}/{quote['id']}", headers=alice_headers)
    assert deleted.json() == {"success": True}

    remaining = (await client.get(quotes_url, headers=alice_headers)).json()["data"]
    assert remaining == {"items": [], "total": 0}
