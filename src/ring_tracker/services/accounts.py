"""Account-level operations: settings updates and account deletion."""

import logging
from pathlib import Path

from ..db.repositories import (
    BodyMetricsRepository,
    ExerciseProgressRepository,
    UserRepository,
    UserVariantsRepository,
    WorkoutRepository,
)
from ..models.user import User

logger = logging.getLogger(__name__)


async def update_settings(user_id: int, updates: dict, db_path: Path | None = None) -> User | None:
    """Shallow-merge client settings keys into the stored settings.

    Returns the updated user, or None if the user does not exist.

    Raises:
        ValueError: If a merged value cannot be represented (e.g. unknown unit).
    """
    repo = UserRepository(db_path)
    user = await repo.get(user_id)
    if user is None:
        return None
    merged = user.settings.merge(updates)
    return await repo.update_settings(user_id, merged)


async def reset_program_position(user_id: int, db_path: Path | None = None) -> User | None:
    """Put the user back at phase 1, week 1."""
    return await update_settings(user_id, {"currentPhase": 1, "currentWeek": 1}, db_path)


async def delete_account(user_id: int, db_path: Path | None = None) -> dict[str, int]:
    """Delete everything owned by a user, then the user.

    Each collection is cleared independently; a failure part-way leaves the
    earlier deletions in place.
    """
    counts = {
        "workouts": await WorkoutRepository(db_path).delete_for_user(user_id),
        "bodyMetrics": await BodyMetricsRepository(db_path).delete_for_user(user_id),
        "exerciseProgress": await ExerciseProgressRepository(db_path).delete_for_user(user_id),
        "userVariants": await UserVariantsRepository(db_path).delete_for_user(user_id),
    }
    await UserRepository(db_path).delete(user_id)
    logger.info("Deleted account %s: %s", user_id, counts)
    return counts
