"""Workout routes."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request

from ...db.repositories import WorkoutRepository
from ...errors import BadRequest, NotFound
from ...models.program import SessionType
from ...models.workout import ExerciseLog, Workout
from ...services.auth import SessionUser
from ...utils.date_utils import get_end_of_week, get_start_of_week, parse_datetime, utcnow
from ..deps import (
    MAX_ID,
    get_app_db_path,
    optional_int,
    optional_str,
    parse_id,
    parse_int_param,
    read_json_body,
    require_session,
)

router = APIRouter(prefix="/api/workouts", tags=["workouts"])

DEFAULT_LIMIT = 10
INVALID_ID = "Invalid workout ID"
NOT_FOUND = "Workout not found"


def parse_exercises(raw) -> list[ExerciseLog]:
    """Parse the client's exercise logs."""
    if not isinstance(raw, list):
        raise BadRequest("Invalid exercises")
    try:
        return [ExerciseLog.from_dict(e) for e in raw]
    except (AttributeError, TypeError, ValueError):
        raise BadRequest("Invalid exercises")


def _require_int(value, field: str) -> int:
    if isinstance(value, bool):
        raise BadRequest(f"Invalid {field}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise BadRequest(f"Invalid {field}")
    if abs(number) > MAX_ID:
        raise BadRequest(f"Invalid {field}")
    return number


@router.get("")
async def list_workouts(
    request: Request,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """List the user's workouts, newest first.

    Query parameters: ``limit`` (default 10), ``thisWeek=true``, ``phase``,
    ``week`` and ``session``.
    """
    params = request.query_params
    limit = parse_int_param(params.get("limit"), DEFAULT_LIMIT)
    if limit <= 0:
        limit = -1  # no limit

    start = end = None
    if params.get("thisWeek") == "true":
        now = utcnow()
        start, end = get_start_of_week(now), get_end_of_week(now)

    workouts = await WorkoutRepository(db_path).list_for_user(
        session.id,
        limit=limit,
        start=start,
        end=end,
        phase=parse_int_param(params.get("phase")),
        week=parse_int_param(params.get("week")),
        session=params.get("session") or None,
    )
    client_workouts = [w.to_client_dict() for w in workouts]
    return {
        "success": True,
        "data": {"workouts": client_workouts, "count": len(client_workouts)},
    }


@router.post("")
async def create_workout(
    request: Request,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Create a workout."""
    body = await read_json_body(request)
    if not all(body.get(key) for key in ("date", "phase", "week", "session")):
        raise BadRequest("Missing required fields")

    try:
        date = parse_datetime(body["date"])
    except (TypeError, ValueError):
        raise BadRequest("Invalid date")
    try:
        session_type = SessionType(body["session"])
    except ValueError:
        raise BadRequest("Invalid session type")

    is_deload = body.get("isDeload", False)
    if not isinstance(is_deload, bool):
        raise BadRequest("Invalid isDeload")

    workout = Workout(
        user_id=session.id,
        date=date,
        phase=_require_int(body["phase"], "phase"),
        week=_require_int(body["week"], "week"),
        session=session_type,
        is_deload=is_deload,
        exercises=parse_exercises(body.get("exercises", [])),
        notes=optional_str(body, "notes"),
        duration=optional_int(body, "duration"),
    )
    workout = await WorkoutRepository(db_path).create(workout)
    return {"success": True, "data": workout.to_client_dict()}


@router.get("/{workout_id}")
async def get_workout(
    workout_id: str,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Get one of the user's workouts."""
    workout = await WorkoutRepository(db_path).get(parse_id(workout_id, INVALID_ID), session.id)
    if workout is None:
        raise NotFound(NOT_FOUND)
    return {"success": True, "data": workout.to_client_dict()}


@router.put("/{workout_id}")
async def update_workout(
    workout_id: str,
    request: Request,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Update exercises, notes and/or duration; other fields are immutable."""
    wid = parse_id(workout_id, INVALID_ID)
    body = await read_json_body(request)

    changes = {}
    if "exercises" in body:
        changes["exercises"] = parse_exercises(body["exercises"])
    if "notes" in body:
        changes["notes"] = optional_str(body, "notes")
    if "duration" in body:
        changes["duration"] = optional_int(body, "duration")

    workout = await WorkoutRepository(db_path).update(wid, session.id, **changes)
    if workout is None:
        raise NotFound(NOT_FOUND)
    return {"success": True, "data": workout.to_client_dict()}


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: str,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Delete one of the user's workouts."""
    deleted = await WorkoutRepository(db_path).delete(parse_id(workout_id, INVALID_ID), session.id)
    if not deleted:
        raise NotFound(NOT_FOUND)
    return {"success": True}
