"""Progress & User Routes: listing-only resource families.

Invariants:
    - GET returns the raw array, newest createdAt first, camelCase fields
    - No create/update/delete routes exist for progress or users
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from fitness_api.models.progress import Progress
from fitness_api.models.user import User

NOW = datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc)


async def test_progress_list_is_newest_first(client, add_records):
    user_id = uuid4()
    older = Progress(
        user_id=user_id, weight=80.5, body_fat=18.2, muscle_mass=40.1,
        created_at=NOW - timedelta(days=7),
    )
    newer = Progress(
        user_id=user_id, weight=79.9, body_fat=17.8, muscle_mass=40.4,
        created_at=NOW,
    )
    await add_records(older, newer)

    res = await client.get("/api/v1/progress")

    assert res.status_code == 200
    body = res.json()
    assert [p["id"] for p in body] == [str(newer.id), str(older.id)]
    assert body[0]["userId"] == str(user_id)
    assert body[0]["weight"] == 79.9
    assert body[0]["bodyFat"] == 17.8
    assert body[0]["muscleMass"] == 40.4
    assert "recordedAt" in body[0]


async def test_progress_user_id_need_not_exist(client, add_records):
    await add_records(Progress(user_id=uuid4(), weight=70.0))
    res = await client.get("/api/v1/progress")
    assert len(res.json()) == 1


async def test_user_list_is_newest_first(client, add_records):
    alice = User(
        name="Alice", age=31, gender="female", email="alice@example.com",
        created_at=NOW - timedelta(hours=1),
    )
    bob = User(name="Bob", email="bob@example.com", created_at=NOW)
    await add_records(alice, bob)

    res = await client.get("/api/v1/user")

    assert res.status_code == 200
    body = res.json()
    assert [u["name"] for u in body] == ["Bob", "Alice"]
    assert body[1]["age"] == 31
    assert body[1]["email"] == "alice@example.com"
    assert body[0]["gender"] is None


async def test_empty_lists(client):
    assert (await client.get("/api/v1/progress")).json() == []
    assert (await client.get("/api/v1/user")).json() == []


@pytest.mark.parametrize("method,path", [
    ("POST", "/api/v1/progress"),
    ("POST", "/api/v1/user"),
    ("DELETE", f"/api/v1/user/{uuid4()}"),
    ("PATCH", f"/api/v1/progress/{uuid4()}"),
])
async def test_no_write_routes_for_listing_families(client, method, path):
    res = await client.request(method, path, json={})
    assert res.status_code in (404, 405)
