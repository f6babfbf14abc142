"""Exercises API: appending exercises to a user.

Invariants:
    - Response is {username, description, duration, date, _id} with a day-string date
    - duration stored and returned as an integer
    - date defaults to the (injected) current date
    - Missing description/duration -> 400 before the user is even looked up
    - Unknown or malformed user id -> 404 "User not found"
"""

from uuid import uuid4

from sqlalchemy import select

from exercise_tracker.models.exercise import Exercise


async def test_add_exercise_with_date(client, seed_user):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": "yoga", "duration": "20", "date": "2024-03-05"},
    )
    assert res.status_code == 200
    assert res.json() == {
        "username": "fcc_test",
        "description": "yoga",
        "duration": 20,
        "date": "Tue Mar 05 2024",
        "_id": str(seed_user.id),
    }


async def test_add_exercise_defaults_date_to_today(client, fixed_today, seed_user, test_db):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": "run", "duration": "30"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["duration"] == 30
    assert body["date"] == "Tue Jan 02 2024"

    result = await test_db.execute(
        select(Exercise).where(Exercise.description == "run")
        .order_by(Exercise.id.desc()),
    )
    stored = result.scalars().first()
    assert stored.duration == 30
    assert stored.date == fixed_today


async def test_add_exercise_from_json_with_numeric_duration(client, seed_user):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        json={"description": "row", "duration": 15.8, "date": "2024-01-20"},
    )
    assert res.status_code == 200
    assert res.json()["duration"] == 15


async def test_exercise_is_appended_last(client, seed_user):
    await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": "early", "duration": "5", "date": "2000-01-01"},
    )
    res = await client.get(f"/api/users/{seed_user.id}/logs")
    descriptions = [e["description"] for e in res.json()["log"]]
    assert descriptions == ["run", "swim", "bike", "early"]


async def test_missing_duration_rejected(client, seed_user):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises", data={"description": "run"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Description and duration are required"


async def test_missing_description_rejected(client, seed_user):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises", data={"duration": "10"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Description and duration are required"


async def test_validation_precedes_user_lookup(client):
    res = await client.post(f"/api/users/{uuid4()}/exercises", data={})
    assert res.status_code == 400


async def test_non_integer_duration_rejected(client, seed_user):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": "run", "duration": "long"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_DURATION"


async def test_oversized_duration_rejected(client, seed_user, test_db):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": "ultra", "duration": "99999999999999999999"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_DURATION"
    stored = await test_db.execute(
        select(Exercise).where(Exercise.description == "ultra")
    )
    assert stored.scalars().first() is None


async def test_long_description_accepted(client, seed_user):
    description = "x" * 2001
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": description, "duration": "10", "date": "2024-01-20"},
    )
    assert res.status_code == 200
    assert res.json()["description"] == description


async def test_invalid_date_rejected(client, seed_user):
    res = await client.post(
        f"/api/users/{seed_user.id}/exercises",
        data={"description": "run", "duration": "10", "date": "someday"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_DATE"


async def test_unknown_user_is_404(client):
    res = await client.post(
        f"/api/users/{uuid4()}/exercises",
        data={"description": "run", "duration": "10"},
    )
    assert res.status_code == 404
    assert res.json()["error"] == "User not found"


async def test_malformed_user_id_is_404(client):
    res = await client.post(
        "/api/users/507f1f77bcf86cd799439011/exercises",
        data={"description": "run", "duration": "10"},
    )
    assert res.status_code == 404
    assert res.json()["error"] == "User not found"
