"""Synthetic training history for demos and development.

Seeded documents carry ``is_seed`` so they can be removed without touching
real data.
"""

import logging
import random
import re
from datetime import datetime, timedelta
from pathlib import Path

from ..data.program_data import get_session_for_phase
from ..db.repositories import BodyMetricsRepository, WorkoutRepository
from ..models.metrics import BodyMetrics
from ..models.program import SessionType
from ..models.user import DELOAD_WEEK, User, WEEKS_PER_PHASE
from ..models.workout import ExerciseLog, ExerciseProgression, SetLog, Workout
from ..utils.date_utils import get_start_of_week, utcnow
from .accounts import reset_program_position
from .stats import DEFAULT_VARIANT

logger = logging.getLogger(__name__)

MIN_WEEKS = 1
MAX_WEEKS = 18
DEFAULT_WEEKS = 6
DEFAULT_START_WEIGHT = 70.0

# Day offset from Monday for each session
SEED_SCHEDULE = (
    (0, SessionType.PUSH_1),
    (2, SessionType.PULL_1),
    (4, SessionType.PUSH_2),
    (5, SessionType.PULL_2),
)
WEIGH_IN_OFFSETS = (0, 4)  # Monday and Friday

DEFAULT_VARIANTS = {
    "Ring Dip (Elbows in)": "Full ROM",
    "Ring Dip (Bulgarian)": "Full ROM",
    "Archer Pushup (Alternating)": "Full",
    "Archer Pushup (Same Side)": "Full ROM",
    "Chest Fly": "Low rings",
    "Tricep Dip": "Legs straight",
    "Tricep Extension": "Low rings",
    "Shoulder Pushup (Feet on floor)": "Pike",
    "Shoulder Pushup (Feet elevated)": "Low elevation",
    "Shoulder Pushup (Feet Elevated)": "Low elevation",
    "Bulgarian Pushup": "Medium rings",
    "Shoulder Shrug (Back to wall)": "Full shrug",
    "Shoulder Tap (Chest to wall)": "Quick taps",
    "Waist Tap (Chest to wall)": "Quick taps",
    "Diamond Pushup (Feet Elevated)": "Low elevation",
    "Handstand Pushup (Chest to wall)": "Partial ROM",
    "Chinup (Regular/Tuck L/L-Sit)": "Regular",
    "Wide Pullup (Tuck L)": "Tuck L",
    "Wide Pullup (L-Sit)": "Tuck L",
    "Mantle Chinup": "Full",
    "Archer Chinup (Alternating)": "Full ROM",
    "Archer Chinup (Same side)": "Partial",
    "Bodyweight Row (Two arms)": "Low rings",
    "Archer Bodyweight Row": "Low rings",
    "Single Arm Row": "Low rings",
    "L-Row": "Tuck",
    "Pelican Curl": "Partial ROM",
    "Pelican Curl Negative": "6s negative",
    "Face Pull": "Light angle",
    "Rear Delt Fly": "Low rings",
    "Ring Rollout": "Knees",
    "Bodyweight Bicep Curl": "Low rings",
    "Two Arm Hang": "Active hang",
    "One Arm Hang": "Assisted",
}

_RANGE = re.compile(r"(\d+)-(\d+)")
_LEADING_INT = re.compile(r"^(\d+)")


def parse_rep_range(target_reps: str) -> tuple[int, int]:
    """``"6-8 L&R"`` -> ``(6, 8)``; a single number gives ``(n, n)``; default ``(5, 8)``."""
    match = _RANGE.search(target_reps)
    if match:
        return int(match.group(1)), int(match.group(2))
    match = _LEADING_INT.match(target_reps)
    if match:
        value = int(match.group(1))
        return value, value
    return 5, 8


def parse_set_range(target_sets: str) -> tuple[int, int]:
    """``"3-4"`` -> ``(3, 4)``; ``"self"`` and ``"20 mins"`` count as one set; default ``(3, 4)``."""
    if target_sets == "self" or "mins" in target_sets:
        return 1, 1
    match = _RANGE.search(target_sets)
    if match:
        return int(match.group(1)), int(match.group(2))
    match = _LEADING_INT.match(target_sets)
    if match:
        value = int(match.group(1))
        return value, value
    return 3, 4


def generate_reps(
    rep_range: tuple[int, int],
    week_progress: float,
    set_index: int,
    rng: random.Random,
) -> int:
    """Reps for one set: rising through the phase, dropping with fatigue, clamped to the range."""
    low, high = rep_range
    base = low + int((high - low) * week_progress)
    fatigue = int(set_index * 0.5)
    variation = rng.randint(-1, 0)
    return max(low, min(high, base - fatigue + variation))


def _phase_and_week(week_index: int) -> tuple[int, int]:
    """0-based week of the program to (phase, week-in-phase)."""
    phase = min(week_index // WEEKS_PER_PHASE + 1, 3)
    week = week_index - (phase - 1) * WEEKS_PER_PHASE + 1
    return phase, week


def generate_exercise_logs(
    phase: int,
    session: SessionType,
    is_deload: bool,
    week_progress: float,
    rng: random.Random,
) -> list[ExerciseLog]:
    """Completed logs for every exercise of a prescribed session."""
    program_session = get_session_for_phase(phase, session, is_deload)
    if program_session is None:
        return []

    logs = []
    for exercise in program_session.exercises:
        set_low, set_high = parse_set_range(exercise.target_sets)
        rep_range = parse_rep_range(exercise.target_reps)

        if is_deload:
            num_sets = set_low
        else:
            num_sets = min(set_high, set_low + int(week_progress * (set_high - set_low + 1)))

        sets = []
        for i in range(num_sets):
            set_log = SetLog(set_number=i + 1, completed=True)
            if exercise.is_timed:
                low, high = rep_range
                set_log.time = low + int(rng.random() * (high - low))
            elif exercise.is_unilateral:
                base = generate_reps(rep_range, week_progress, i, rng)
                set_log.reps_left = base
                set_log.reps_right = base + (1 if rng.random() > 0.7 else 0)
            else:
                set_log.reps = generate_reps(rep_range, week_progress, i, rng)

            if rng.random() > 0.7:
                set_log.rpe = 7 + rng.randint(0, 2)
            sets.append(set_log)

        logs.append(
            ExerciseLog(
                letter=exercise.letter,
                exercise_name=exercise.name,
                progression=ExerciseProgression(
                    variant=DEFAULT_VARIANTS.get(exercise.name, DEFAULT_VARIANT)
                ),
                sets=sets,
            )
        )
    return logs


def generate_workouts(
    user_id: int,
    weeks: int,
    start_date: datetime,
    rng: random.Random | None = None,
) -> list[Workout]:
    """Four workouts per week starting at ``start_date`` (expected to be a Monday)."""
    rng = rng or random.Random()
    workouts = []

    for week_index in range(weeks):
        phase, week = _phase_and_week(week_index)
        is_deload = week == DELOAD_WEEK
        week_progress = (week - 1) / 5
        week_start = start_date + timedelta(weeks=week_index)

        for offset, session in SEED_SCHEDULE:
            workout_date = week_start + timedelta(days=offset)
            workouts.append(
                Workout(
                    user_id=user_id,
                    date=workout_date,
                    phase=phase,
                    week=week,
                    session=session,
                    is_deload=is_deload,
                    exercises=generate_exercise_logs(
                        phase, session, is_deload, week_progress, rng
                    ),
                    duration=35 + rng.randint(0, 19),
                    is_seed=True,
                    created_at=workout_date,
                    updated_at=workout_date,
                )
            )

    return workouts


def generate_body_metrics(
    user_id: int,
    weeks: int,
    start_date: datetime,
    start_weight: float = DEFAULT_START_WEIGHT,
    rng: random.Random | None = None,
) -> list[BodyMetrics]:
    """Two weigh-ins a week with small noise around a slow downward trend."""
    rng = rng or random.Random()
    metrics = []

    for week_index in range(weeks):
        for offset in WEIGH_IN_OFFSETS:
            day = start_date + timedelta(weeks=week_index, days=offset)
            fluctuation = (rng.random() - 0.5) * 0.6
            trend = -0.05 * week_index
            metrics.append(
                BodyMetrics(
                    user_id=user_id,
                    date=day,
                    weight=round(start_weight + trend + fluctuation, 1),
                    is_seed=True,
                    created_at=day,
                )
            )

    return metrics


def seed_start_date(weeks: int, now: datetime | None = None) -> datetime:
    """08:00 on the Monday of the week ``weeks`` weeks ago."""
    now = now or utcnow()
    monday = get_start_of_week(now - timedelta(weeks=weeks))
    return monday.replace(hour=8)


async def seed_user(
    user: User,
    weeks: int = DEFAULT_WEEKS,
    db_path: Path | None = None,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> dict[str, int]:
    """Replace the user's seed documents with ``weeks`` weeks of fresh data.

    Raises:
        ValueError: If ``weeks`` is outside 1-18.
    """
    if not MIN_WEEKS <= weeks <= MAX_WEEKS:
        raise ValueError(f"weeks must be between {MIN_WEEKS} and {MAX_WEEKS}")

    rng = rng or random.Random()
    workout_repo = WorkoutRepository(db_path)
    metrics_repo = BodyMetricsRepository(db_path)

    deleted_workouts = await workout_repo.delete_for_user(user.id, seed_only=True)
    deleted_metrics = await metrics_repo.delete_for_user(user.id, seed_only=True)

    start = seed_start_date(weeks, now)
    start_weight = user.settings.body_weight or DEFAULT_START_WEIGHT
    workouts = generate_workouts(user.id, weeks, start, rng)
    metrics = generate_body_metrics(user.id, weeks, start, start_weight, rng)

    await workout_repo.create_many(workouts)
    await metrics_repo.create_many(metrics)

    logger.info(
        "Seeded %d workouts and %d body metrics for user %s", len(workouts), len(metrics), user.id
    )
    return {
        "deletedWorkouts": deleted_workouts,
        "deletedMetrics": deleted_metrics,
        "workouts": len(workouts),
        "metrics": len(metrics),
    }


async def delete_seed_data(user_id: int, db_path: Path | None = None) -> dict[str, int]:
    """Remove the user's seed documents and reset them to phase 1, week 1."""
    deleted_workouts = await WorkoutRepository(db_path).delete_for_user(user_id, seed_only=True)
    deleted_metrics = await BodyMetricsRepository(db_path).delete_for_user(user_id, seed_only=True)
    await reset_program_position(user_id, db_path)
    logger.info(
        "Deleted %d seed workouts and %d seed metrics for user %s",
        deleted_workouts,
        deleted_metrics,
        user_id,
    )
    return {"workouts": deleted_workouts, "metrics": deleted_metrics}

