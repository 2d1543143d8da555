"""Tests for the current-user API."""

from conftest import make_log, make_workout

from ring_tracker.db.repositories import (
    BodyMetricsRepository,
    ExerciseProgressRepository,
    UserRepository,
    UserVariantsRepository,
    WorkoutRepository,
)
from ring_tracker.models.metrics import BodyMetrics
from ring_tracker.services.progress import record_workout_progress


class TestGetUser:
    """Tests for GET /api/user."""

    async def test_returns_user_with_settings(self, client, auth_headers, user):
        response = await client.get("/api/user", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["id"] == str(user.id)
        assert body["data"]["email"] == "athlete@example.com"
        assert body["data"]["settings"]["currentPhase"] == 1
        assert body["data"]["settings"]["defaultRestTime"] == 90

    async def test_requires_session(self, client):
        response = await client.get("/api/user")
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}

    async def test_rejects_bad_scheme(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ", 1)[1]
        response = await client.get("/api/user", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    async def test_deleted_user(self, client, auth_headers, user, db_path):
        await UserRepository(db_path).delete(user.id)
        response = await client.get("/api/user", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "User not found"


class TestUpdateSettings:
    """Tests for PUT /api/user."""

    async def test_shallow_merge(self, client, auth_headers):
        response = await client.put(
            "/api/user",
            headers=auth_headers,
            json={"settings": {"currentWeek": 3, "weightUnit": "lbs"}},
        )

        assert response.status_code == 200
        settings = response.json()["data"]["settings"]
        assert settings["currentWeek"] == 3
        assert settings["weightUnit"] == "lbs"
        assert settings["currentPhase"] == 1
        assert settings["darkMode"] is True

    async def test_settings_required(self, client, auth_headers):
        for body in ({}, {"settings": None}, {"settings": {}}):
            response = await client.put("/api/user", headers=auth_headers, json=body)
            assert response.status_code == 400
            assert response.json()["error"] == "Settings required"

    async def test_invalid_settings(self, client, auth_headers):
        for settings in ("dark", {"weightUnit": "stone"}):
            response = await client.put(
                "/api/user", headers=auth_headers, json={"settings": settings}
            )
            assert response.status_code == 400
            assert response.json()["error"] == "Invalid settings"

    async def test_invalid_json(self, client, auth_headers):
        response = await client.put(
            "/api/user",
            headers={**auth_headers, "Content-Type": "application/json"},
            content=b"{not json",
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid JSON body"}


class TestDeleteUser:
    """Tests for DELETE /api/user."""

    async def test_cascades_to_owned_documents(
        self, client, auth_headers, user, other_user, db_path, utc
    ):
        workout = make_workout(
            user.id, utc(2024, 6, 10), exercises=[make_log("Chest Fly", [8], variant="Low rings")]
        )
        await WorkoutRepository(db_path).create(workout)
        await record_workout_progress(workout, db_path=db_path)
        await BodyMetricsRepository(db_path).create(
            BodyMetrics(user_id=user.id, date=utc(2024, 6, 10), weight=70)
        )
        await WorkoutRepository(db_path).create(make_workout(other_user.id, utc(2024, 6, 10)))

        response = await client.delete("/api/user", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True}

        assert await UserRepository(db_path).get(user.id) is None
        assert await WorkoutRepository(db_path).list_for_user(user.id) == []
        assert await BodyMetricsRepository(db_path).list_for_user(user.id) == []
        assert await ExerciseProgressRepository(db_path).get(user.id, "Chest Fly") is None
        assert await UserVariantsRepository(db_path).get(user.id, "Chest Fly") is None

        # Other users are untouched
        assert len(await WorkoutRepository(db_path).list_for_user(other_user.id)) == 1
