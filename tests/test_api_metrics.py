"""Tests for the body metrics API."""

from ring_tracker.db.repositories import BodyMetricsRepository
from ring_tracker.models.metrics import BodyMetrics


class TestCreateMetric:
    """Tests for POST /api/metrics."""

    async def test_create(self, client, auth_headers):
        response = await client.post(
            "/api/metrics",
            headers=auth_headers,
            json={
                "date": "2024-06-15T07:30:00.000Z",
                "weight": 71.4,
                "measurements": {"waist": 81, "bicepLeft": 34.5},
                "notes": "After coffee",
            },
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"].isdigit()
        assert data["date"] == "2024-06-15T07:30:00.000Z"
        assert data["weight"] == 71.4
        assert data["measurements"] == {"waist": 81, "bicepLeft": 34.5}
        assert data["notes"] == "After coffee"

    async def test_date_defaults_to_now(self, client, auth_headers):
        response = await client.post("/api/metrics", headers=auth_headers, json={"weight": 70})

        data = response.json()["data"]
        assert data["date"].endswith("Z")
        assert data["measurements"] is None

    async def test_invalid_values(self, client, auth_headers):
        for body, error in (
            ({"date": "soon"}, "Invalid date"),
            ({"weight": "heavy"}, "Invalid weight"),
            ({"weight": True}, "Invalid weight"),
            ({"measurements": [80]}, "Invalid measurements"),
            ({"weight": 10**30}, "Invalid weight"),
            ({"notes": ["a"]}, "Invalid notes"),
            ({"notes": {"mood": "ok"}}, "Invalid notes"),
        ):
            response = await client.post("/api/metrics", headers=auth_headers, json=body)
            assert response.status_code == 400
            assert response.json()["error"] == error


class TestListMetrics:
    """Tests for GET /api/metrics."""

    async def test_newest_first_and_scoped(self, client, auth_headers, db_path, user, other_user, utc):
        repo = BodyMetricsRepository(db_path)
        await repo.create_many(
            [
                BodyMetrics(user_id=user.id, date=utc(2024, 6, 10), weight=70.8),
                BodyMetrics(user_id=user.id, date=utc(2024, 6, 14), weight=70.4),
                BodyMetrics(user_id=other_user.id, date=utc(2024, 6, 12), weight=90.0),
            ]
        )

        response = await client.get("/api/metrics", headers=auth_headers)
        data = response.json()["data"]
        assert [m["weight"] for m in data] == [70.4, 70.8]

    async def test_requires_session(self, client):
        response = await client.get("/api/metrics")
        assert response.status_code == 401


class TestDeleteMetric:
    """Tests for DELETE /api/metrics/{id}."""

    async def test_delete(self, client, auth_headers, other_headers, db_path, user, utc):
        metric = await BodyMetricsRepository(db_path).create(
            BodyMetrics(user_id=user.id, date=utc(2024, 6, 10), weight=70)
        )
        path = f"/api/metrics/{metric.id}"

        response = await client.delete(path, headers=other_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "Metric not found"

        response = await client.delete(path, headers=auth_headers)
        assert response.json() == {"success": True}
        assert await BodyMetricsRepository(db_path).list_for_user(user.id) == []

    async def test_malformed_id(self, client, auth_headers):
        for raw_id in ("12ab", "9" * 30):
            response = await client.delete(f"/api/metrics/{raw_id}", headers=auth_headers)
            assert response.status_code == 400
            assert response.json()["error"] == "Invalid ID"
