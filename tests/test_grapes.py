"""Endpoint tests for the plain /api/v1/grapes routes."""

import pytest

BASE = "/api/v1/grapes/"


@pytest.mark.asyncio
async def test_list_returns_bare_list(test_client, grape_store, sample_grape):
    grape_store.grapes = [sample_grape]

    response = await test_client.get(BASE)

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body, list)
    assert body[0]["name"] == "Red"


@pytest.mark.asyncio
async def test_create_then_delete_broadcasts_twice(test_client, grape_store, hub):
    created = await test_client.post(BASE, json={"name": "Merlot", "color": "purple"})
    deleted = await test_client.delete(BASE + "1")

    assert created.status_code == 201
    assert deleted.status_code == 200
    assert hub.broadcasts == 2
    assert grape_store.grapes == []


@pytest.mark.asyncio
async def test_list_failure_is_opaque(test_client, grape_store):
    grape_store.fail_with = RuntimeError("boom")

    response = await test_client.get(BASE)

    assert response.status_code == 500
    assert response.text == "Failed"


@pytest.mark.asyncio
async def test_missing_name_is_rejected(test_client, grape_store, hub):
    response = await test_client.post(BASE, json={"id": 0})

    assert response.status_code == 422
    assert grape_store.added == []
    assert hub.broadcasts == 0
