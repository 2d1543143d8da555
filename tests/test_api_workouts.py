"""Tests for the workouts API."""

from datetime import timedelta

import pytest
from conftest import make_log, make_workout

from ring_tracker.db.repositories import WorkoutRepository
from ring_tracker.models.program import SessionType
from ring_tracker.utils.date_utils import utcnow


def _workout_body(**overrides) -> dict:
    body = {
        "date": "2024-06-10T08:00:00.000Z",
        "phase": 1,
        "week": 2,
        "session": "Push 1",
        "exercises": [
            {
                "letter": "A1",
                "exerciseName": "Ring Dip (Elbows in)",
                "progression": {"variant": "Full ROM"},
                "sets": [{"setNumber": 1, "reps": 7, "completed": True}],
            }
        ],
        "duration": 48,
    }
    body.update(overrides)
    return body


@pytest.fixture
async def saved_workout(db_path, user, utc):
    """A workout owned by ``user``."""
    workout = make_workout(user.id, utc(2024, 6, 10, 8), exercises=[make_log("Chest Fly", [8, 8])])
    return await WorkoutRepository(db_path).create(workout)


class TestCreateWorkout:
    """Tests for POST /api/workouts."""

    async def test_create(self, client, auth_headers):
        response = await client.post("/api/workouts", headers=auth_headers, json=_workout_body())

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"].isdigit()
        assert data["date"] == "2024-06-10T08:00:00.000Z"
        assert data["session"] == "Push 1"
        assert data["isDeload"] is False
        assert data["exercises"][0]["progression"]["variant"] == "Full ROM"
        assert data["duration"] == 48

    async def test_missing_fields(self, client, auth_headers):
        body = _workout_body()
        del body["session"]
        response = await client.post("/api/workouts", headers=auth_headers, json=body)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Missing required fields"}

    @pytest.mark.parametrize(
        "overrides,error",
        [
            ({"session": "Legs"}, "Invalid session type"),
            ({"date": "last tuesday"}, "Invalid date"),
            ({"phase": "two"}, "Invalid phase"),
            ({"week": [1]}, "Invalid week"),
            ({"exercises": "all of them"}, "Invalid exercises"),
            ({"duration": {"minutes": 40}}, "Invalid duration"),
            ({"duration": "45"}, "Invalid duration"),
            ({"notes": ["a"]}, "Invalid notes"),
            ({"isDeload": "false"}, "Invalid isDeload"),
            ({"phase": 10**30}, "Invalid phase"),
        ],
    )
    async def test_invalid_fields(self, client, auth_headers, overrides, error):
        response = await client.post(
            "/api/workouts", headers=auth_headers, json=_workout_body(**overrides)
        )
        assert response.status_code == 400
        assert response.json()["error"] == error

    async def test_requires_session(self, client):
        response = await client.post("/api/workouts", json=_workout_body())
        assert response.status_code == 401


class TestListWorkouts:
    """Tests for GET /api/workouts."""

    async def test_default_limit_and_order(self, client, auth_headers, db_path, user, utc):
        start = utc(2024, 6, 3, 8)
        await WorkoutRepository(db_path).create_many(
            [make_workout(user.id, start + timedelta(days=i)) for i in range(12)]
        )

        response = await client.get("/api/workouts", headers=auth_headers)
        data = response.json()["data"]
        assert data["count"] == 10
        assert data["workouts"][0]["date"] == "2024-06-14T08:00:00.000Z"

        response = await client.get("/api/workouts?limit=0", headers=auth_headers)
        assert response.json()["data"]["count"] == 12

        response = await client.get("/api/workouts?limit=abc", headers=auth_headers)
        assert response.json()["data"]["count"] == 10

    async def test_filters(self, client, auth_headers, db_path, user, other_user, utc):
        await WorkoutRepository(db_path).create_many(
            [
                make_workout(user.id, utc(2024, 6, 10), phase=1, week=1),
                make_workout(user.id, utc(2024, 6, 12), session=SessionType.PULL_1, phase=1, week=1),
                make_workout(user.id, utc(2024, 7, 22), phase=2, week=1),
                make_workout(other_user.id, utc(2024, 6, 11), phase=1, week=1),
            ]
        )

        response = await client.get("/api/workouts?phase=1&week=1", headers=auth_headers)
        assert response.json()["data"]["count"] == 2

        response = await client.get("/api/workouts?session=Pull%201", headers=auth_headers)
        workouts = response.json()["data"]["workouts"]
        assert [w["session"] for w in workouts] == ["Pull 1"]

        # Unparseable filters are ignored
        response = await client.get("/api/workouts?phase=x", headers=auth_headers)
        assert response.json()["data"]["count"] == 3

        huge = "9" * 30
        response = await client.get(f"/api/workouts?phase={huge}", headers=auth_headers)
        assert response.json()["data"]["count"] == 3

    async def test_this_week(self, client, auth_headers, db_path, user):
        now = utcnow()
        await WorkoutRepository(db_path).create_many(
            [make_workout(user.id, now), make_workout(user.id, now - timedelta(days=30))]
        )

        response = await client.get("/api/workouts?thisWeek=true", headers=auth_headers)
        assert response.json()["data"]["count"] == 1

    async def test_empty(self, client, auth_headers):
        response = await client.get("/api/workouts", headers=auth_headers)
        assert response.json() == {"success": True, "data": {"workouts": [], "count": 0}}


class TestSingleWorkout:
    """Tests for GET/PUT/DELETE /api/workouts/{id}."""

    async def test_get(self, client, auth_headers, saved_workout):
        response = await client.get(f"/api/workouts/{saved_workout.id}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == str(saved_workout.id)
        assert data["exercises"][0]["exerciseName"] == "Chest Fly"

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    @pytest.mark.parametrize("raw_id", ["abc", "9" * 30])
    async def test_malformed_id(self, client, auth_headers, method, raw_id):
        kwargs = {"json": {"notes": "x"}} if method == "PUT" else {}
        response = await client.request(
            method, f"/api/workouts/{raw_id}", headers=auth_headers, **kwargs
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid workout ID"}

    async def test_missing(self, client, auth_headers):
        response = await client.get("/api/workouts/9999", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "Workout not found"

    async def test_other_users_workout(
        self, client, auth_headers, other_headers, saved_workout, db_path, user
    ):
        path = f"/api/workouts/{saved_workout.id}"

        assert (await client.get(path, headers=other_headers)).status_code == 404
        assert (
            await client.put(path, headers=other_headers, json={"notes": "mine now"})
        ).status_code == 404
        assert (await client.delete(path, headers=other_headers)).status_code == 404

        # Still there, unchanged, for the owner
        stored = await WorkoutRepository(db_path).get(saved_workout.id, user.id)
        assert stored is not None
        assert stored.notes is None

    async def test_update_supplied_fields(self, client, auth_headers, saved_workout):
        path = f"/api/workouts/{saved_workout.id}"
        response = await client.put(path, headers=auth_headers, json={"notes": "Strong day"})

        data = response.json()["data"]
        assert data["notes"] == "Strong day"
        assert data["duration"] == 45
        assert len(data["exercises"]) == 1

        response = await client.put(
            path,
            headers=auth_headers,
            json={"exercises": [], "duration": 50, "phase": 3},
        )
        data = response.json()["data"]
        assert data["exercises"] == []
        assert data["duration"] == 50
        # Phase is not editable
        assert data["phase"] == 1

    async def test_update_invalid_exercises(self, client, auth_headers, saved_workout):
        response = await client.put(
            f"/api/workouts/{saved_workout.id}", headers=auth_headers, json={"exercises": 5}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid exercises"

    @pytest.mark.parametrize(
        "body,error",
        [
            ({"duration": [50]}, "Invalid duration"),
            ({"notes": {"text": "x"}}, "Invalid notes"),
        ],
    )
    async def test_update_invalid_fields(self, client, auth_headers, saved_workout, body, error):
        response = await client.put(
            f"/api/workouts/{saved_workout.id}", headers=auth_headers, json=body
        )
        assert response.status_code == 400
        assert response.json()["error"] == error

    async def test_clear_notes(self, client, auth_headers, saved_workout):
        path = f"/api/workouts/{saved_workout.id}"
        await client.put(path, headers=auth_headers, json={"notes": "Tired"})
        response = await client.put(path, headers=auth_headers, json={"notes": None})
        assert response.json()["data"]["notes"] is None

    async def test_delete(self, client, auth_headers, saved_workout):
        path = f"/api/workouts/{saved_workout.id}"
        response = await client.delete(path, headers=auth_headers)
        assert response.json() == {"success": True}

        response = await client.delete(path, headers=auth_headers)
        assert response.status_code == 404
