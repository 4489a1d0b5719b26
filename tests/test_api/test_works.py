"""
Tests for work registration and deletion endpoints.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.models import Tag, Work, work_tags


@pytest.mark.asyncio
async def test_create_work(client: AsyncClient, signup, sample_work_data: dict):
    """Test registering a new work."""
    headers = await signup("alice")

    response = await client.post("/api/works", json=sample_work_data, headers=headers)

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert isinstance(data["id"], int)


@pytest.mark.asyncio
async def test_create_work_numeric_pixiv_id(client: AsyncClient, signup, db_session):
    """Numeric source-site ids are stored as strings."""
    headers = await signup("alice")

    response = await client.post(
        "/api/works",
        json={"pixivId": 98765, "title": "Numbers", "type": "novel"},
        headers=headers,
    )

    assert response.status_code == 201
    work = await db_session.get(Work, response.json()["id"])
    assert work.pixiv_id == "98765"


@pytest.mark.asyncio
async def test_create_work_requires_type(client: AsyncClient, signup):
    headers = await signup("alice")

    response = await client.post(
        "/api/works",
        json={"pixivId": "1", "title": "Untyped"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "validation_failed"


@pytest.mark.asyncio
async def test_create_work_requires_auth(client: AsyncClient, sample_work_data: dict):
    response = await client.post("/api/works", json=sample_work_data)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_existing_tag_is_reused(client: AsyncClient, signup, db_session):
    """Registering with an existing tag name reuses its row."""
    alice = await signup("alice")
    bob = await signup("bob")

    await client.post(
        "/api/works",
        json={"pixivId": "1", "title": "First", "type": "art", "tags": ["cat"]},
        headers=alice,
    )
    first_id = (await db_session.execute(select(Tag.id).where(Tag.name == "cat"))).scalar_one()

    await client.post(
        "/api/works",
        json={"pixivId": "2", "title": "Second", "type": "art", "tags": ["cat", "dog"]},
        headers=bob,
    )

    rows = (await db_session.execute(select(Tag.id).where(Tag.name == "cat"))).scalars().all()
    assert rows == [first_id]
    links = await db_session.execute(
        select(func.count()).select_from(work_tags).where(work_tags.c.tag_id == first_id)
    )
    assert links.scalar_one() == 2


@pytest.mark.asyncio
async def test_duplicate_tags_in_request_linked_once(client: AsyncClient, signup, db_session):
    headers = await signup("alice")

    response = await client.post(
        "/api/works",
        json={"pixivId": "1", "title": "Dup", "type": "art", "tags": ["cat", "cat", "Cat"]},
        headers=headers,
    )

    work_id = response.json()["id"]
    links = await db_session.execute(
        select(func.count()).select_from(work_tags).where(work_tags.c.work_id == work_id)
    )
    # Tag names are case-sensitive
    assert links.scalar_one() == 2


@pytest.mark.asyncio
async def test_delete_work(client: AsyncClient, signup, sample_work_data: dict, db_session):
    """Test deleting an owned work cascades to its tag links."""
    headers = await signup("alice")
    create_response = await client.post("/api/works", json=sample_work_data, headers=headers)
    work_id = create_response.json()["id"]

    response = await client.delete(f"/api/works/{work_id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}

    search = await client.post(
        "/api/search",
        json={"type": sample_work_data["type"], "tags": []},
        headers=headers,
    )
    assert search.json() == []

    links = await db_session.execute(
        select(func.count()).select_from(work_tags).where(work_tags.c.work_id == work_id)
    )
    assert links.scalar_one() == 0
    # Tags themselves are never deleted
    tag_count = await db_session.execute(select(func.count(Tag.id)))
    assert tag_count.scalar_one() == 2


@pytest.mark.asyncio
async def test_delete_work_not_found(client: AsyncClient, signup):
    headers = await signup("alice")

    response = await client.delete("/api/works/9999", headers=headers)

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_delete_other_users_work(client: AsyncClient, signup, sample_work_data: dict):
    """Deleting someone else's work looks like not-found and changes nothing."""
    alice = await signup("alice")
    bob = await signup("bob")
    create_response = await client.post("/api/works", json=sample_work_data, headers=alice)
    work_id = create_response.json()["id"]

    response = await client.delete(f"/api/works/{work_id}", headers=bob)

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"

    search = await client.post(
        "/api/search",
        json={"type": sample_work_data["type"], "tags": []},
        headers=alice,
    )
    assert [work["id"] for work in search.json()] == [work_id]


@pytest.mark.asyncio
async def test_create_work_tag_too_long(client: AsyncClient, signup):
    headers = await signup("alice")

    response = await client.post(
        "/api/works",
        json={"pixivId": "1", "title": "Long", "type": "art", "tags": ["ok", "x" * 256]},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "validation_failed"


@pytest.mark.asyncio
async def test_create_work_tag_at_length_limit(client: AsyncClient, signup):
    headers = await signup("alice")

    response = await client.post(
        "/api/works",
        json={"pixivId": "1", "title": "Long", "type": "art", "tags": ["x" * 255]},
        headers=headers,
    )

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_work_commit_failure(
    client: AsyncClient,
    signup,
    sample_work_data: dict,
    db_session,
    monkeypatch,
):
    """A failed commit is reported as a query failure, not as success."""
    headers = await signup("alice")

    async def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    response = await client.post("/api/works", json=sample_work_data, headers=headers)

    assert response.status_code == 500
    assert response.json()["error"] == "query_failed"

    search = await client.post(
        "/api/search",
        json={"type": sample_work_data["type"], "tags": []},
        headers=headers,
    )
    assert search.json() == []


@pytest.mark.asyncio
async def test_delete_work_commit_failure(
    client: AsyncClient,
    signup,
    sample_work_data: dict,
    db_session,
    monkeypatch,
):
    headers = await signup("alice")
    create_response = await client.post("/api/works", json=sample_work_data, headers=headers)
    work_id = create_response.json()["id"]

    async def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("connection lost"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    response = await client.delete(f"/api/works/{work_id}", headers=headers)

    assert response.status_code == 500
    assert response.json()["error"] == "query_failed"

    search = await client.post(
        "/api/search",
        json={"type": sample_work_data["type"], "tags": []},
        headers=headers,
    )
    assert [work["id"] for work in search.json()] == [work_id]
