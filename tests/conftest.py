"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import httpx
import pytest

from ring_tracker.db import init_db
from ring_tracker.models.program import SessionType
from ring_tracker.models.workout import ExerciseLog, ExerciseProgression, SetLog, Workout
from ring_tracker.services.auth import issue_token, sign_in
from ring_tracker.web import create_app


@pytest.fixture(autouse=True)
def secret_key(monkeypatch):
    """Use a fixed signing secret for every test."""
    monkeypatch.setenv("RING_TRACKER_SECRET_KEY", "test-secret")


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def db_path(temp_db_path):
    """A temporary database with the schema created."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
async def user(db_path):
    """A signed-in user with default settings."""
    return await sign_in("athlete@example.com", "Test Athlete", db_path=db_path)


@pytest.fixture
async def other_user(db_path):
    """A second user, for ownership checks."""
    return await sign_in("other@example.com", "Other Athlete", db_path=db_path)


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def other_headers(other_user):
    return {"Authorization": f"Bearer {issue_token(other_user)}"}


@pytest.fixture
def app(db_path):
    return create_app(db_path)


@pytest.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def make_workout(
    user_id: int,
    date: datetime,
    session: SessionType = SessionType.PUSH_1,
    exercises: list[ExerciseLog] | None = None,
    phase: int = 1,
    week: int = 1,
    duration: int | None = 45,
) -> Workout:
    """Build an unsaved workout."""
    return Workout(
        user_id=user_id,
        date=date,
        phase=phase,
        week=week,
        session=session,
        is_deload=week == 6,
        exercises=exercises or [],
        duration=duration,
    )


def make_log(name: str, reps: list[int], variant: str = "", completed: bool = True) -> ExerciseLog:
    """Build an exercise log with one bilateral set per entry in ``reps``."""
    return ExerciseLog(
        letter="A1",
        exercise_name=name,
        progression=ExerciseProgression(variant=variant),
        sets=[SetLog(set_number=i + 1, reps=r, completed=completed) for i, r in enumerate(reps)],
    )


@pytest.fixture
def utc():
    """Shortcut for building aware UTC datetimes."""

    def _utc(*args) -> datetime:
        return datetime(*args, tzinfo=timezone.utc)

    return _utc
