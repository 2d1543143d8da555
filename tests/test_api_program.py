"""Tests for the program catalog route and app-level responses."""

from ring_tracker import __version__


class TestProgramRoute:
    """Tests for GET /api/program."""

    async def test_no_session_needed(self, client):
        response = await client.get("/api/program")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [p["name"] for p in body["data"]["phases"]] == [
            "Foundation",
            "Development",
            "Peak Performance",
        ]
        assert len(body["data"]["exercises"]) == 33
        assert body["data"]["weeklySchedule"]["monday"] == "Push 1"


class TestAppResponses:
    """Tests for health and error envelopes."""

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.json() == {"status": "healthy", "version": __version__}

    async def test_unknown_route(self, client):
        response = await client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    async def test_wrong_method(self, client):
        response = await client.patch("/api/program")
        assert response.status_code == 405
        assert response.json()["success"] is False
