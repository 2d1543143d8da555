"""Data models for ring-tracker."""

from .metrics import BodyMeasurements, BodyMetrics
from .program import (
    ExerciseCategory,
    ExerciseDefinition,
    ProgramExercise,
    ProgramPhase,
    ProgramSession,
    SessionType,
)
from .progress import ExerciseProgress, UserVariants
from .user import User, UserSettings, WeightUnit
from .workout import ExerciseLog, ExerciseProgression, SetLog, Workout

__all__ = [
    "BodyMeasurements",
    "BodyMetrics",
    "ExerciseCategory",
    "ExerciseDefinition",
    "ExerciseLog",
    "ExerciseProgress",
    "ExerciseProgression",
    "ProgramExercise",
    "ProgramPhase",
    "ProgramSession",
    "SessionType",
    "SetLog",
    "User",
    "UserSettings",
    "UserVariants",
    "WeightUnit",
    "Workout",
]
