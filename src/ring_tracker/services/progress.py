"""Per-exercise progress and variant tracking for finished workouts."""

import logging
from pathlib import Path

from ..db.repositories import ExerciseProgressRepository, UserVariantsRepository
from ..models.progress import (
    CurrentProgression,
    DatedValue,
    ExerciseProgress,
    PersonalBest,
    ProgressDataPoint,
    UserVariants,
)
from ..models.workout import ExerciseLog, Workout
from .stats import DEFAULT_VARIANT, exercise_total_reps

logger = logging.getLogger(__name__)


def build_data_point(workout: Workout, log: ExerciseLog) -> ProgressDataPoint | None:
    """Summarize one exercise of a workout, or None if no set was completed."""
    completed = log.completed_sets()
    if not completed:
        return None

    reps = exercise_total_reps(log)
    added = log.progression.added_weight or 0
    return ProgressDataPoint(
        date=workout.date,
        phase=workout.phase,
        week=workout.week,
        variant=log.progression.variant or DEFAULT_VARIANT,
        ring_height=log.progression.ring_height,
        added_weight=log.progression.added_weight,
        total_sets=len(completed),
        total_reps=reps,
        avg_reps_per_set=round(reps / len(completed), 1),
        total_volume=reps * added if added else reps,
        best_set=max(s.best_side() for s in completed),
        notes=log.notes,
    )


def apply_data_point(
    progress: ExerciseProgress | None,
    point: ProgressDataPoint,
    user_id: int,
    exercise_name: str,
    longest_hold: int | None = None,
) -> ExerciseProgress:
    """Fold a data point into the exercise's progress document."""
    current = CurrentProgression(
        variant=point.variant,
        ring_height=point.ring_height,
        last_used=point.date,
        avg_reps=point.avg_reps_per_set,
        avg_sets=float(point.total_sets),
    )
    if progress is None:
        progress = ExerciseProgress(
            user_id=user_id,
            exercise_name=exercise_name,
            current_progression=current,
        )
    else:
        progress.current_progression = current

    progress.history.append(point)
    if point.variant not in progress.used_variants:
        progress.used_variants.append(point.variant)

    best = progress.personal_bests.get(point.variant)
    if best is None:
        best = PersonalBest(
            max_reps=DatedValue(point.best_set, point.date),
            max_volume=DatedValue(point.total_volume, point.date),
            max_sets=DatedValue(point.total_sets, point.date),
        )
        progress.personal_bests[point.variant] = best
    else:
        if point.best_set > best.max_reps.value:
            best.max_reps = DatedValue(point.best_set, point.date)
        if point.total_volume > best.max_volume.value:
            best.max_volume = DatedValue(point.total_volume, point.date)
        if point.total_sets > best.max_sets.value:
            best.max_sets = DatedValue(point.total_sets, point.date)

    if longest_hold and (best.longest_hold is None or longest_hold > best.longest_hold.value):
        best.longest_hold = DatedValue(longest_hold, point.date)

    return progress


async def record_workout_progress(workout: Workout, db_path: Path | None = None) -> int:
    """Update progress and variant usage for every exercise of a workout.

    Returns the number of exercises that were recorded.
    """
    progress_repo = ExerciseProgressRepository(db_path)
    variants_repo = UserVariantsRepository(db_path)
    recorded = 0

    for log in workout.exercises:
        point = build_data_point(workout, log)
        if point is None:
            continue

        holds = [s.time for s in log.completed_sets() if s.time]
        progress = await progress_repo.get(workout.user_id, log.exercise_name)
        progress = apply_data_point(
            progress,
            point,
            workout.user_id,
            log.exercise_name,
            longest_hold=max(holds) if holds else None,
        )
        await progress_repo.upsert(progress)

        if log.progression.variant:
            variants = await variants_repo.get(workout.user_id, log.exercise_name)
            if variants is None:
                variants = UserVariants(user_id=workout.user_id, exercise_name=log.exercise_name)
            variants.record(log.progression.variant, workout.date)
            await variants_repo.upsert(variants)

        recorded += 1

    logger.debug("Recorded progress for %d exercises of workout %s", recorded, workout.id)
    return recorded
