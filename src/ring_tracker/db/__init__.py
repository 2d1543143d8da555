"""Database layer for ring-tracker."""

from .engine import get_db_path, init_db
from .repositories import (
    BodyMetricsRepository,
    ExerciseProgressRepository,
    UserRepository,
    UserVariantsRepository,
    WorkoutRepository,
)

__all__ = [
    "BodyMetricsRepository",
    "ExerciseProgressRepository",
    "get_db_path",
    "init_db",
    "UserRepository",
    "UserVariantsRepository",
    "WorkoutRepository",
]
