"""Application services for ring-tracker."""

from .accounts import delete_account, reset_program_position, update_settings
from .advancement import (
    SESSION_TYPES,
    AdvancementOption,
    CompletionType,
    advancement_options,
    apply_advancement,
    completion_type,
    is_week_complete,
)
from .auth import SessionUser, decode_token, issue_token, sign_in
from .progress import record_workout_progress
from .recorder import (
    WorkoutRecorder,
    create_initial_exercise_logs,
    parse_target_sets,
    previous_exercise_logs,
    session_from_slug,
    session_to_slug,
    variant_suggestions,
)

__all__ = [
    "SESSION_TYPES",
    "AdvancementOption",
    "CompletionType",
    "SessionUser",
    "WorkoutRecorder",
    "advancement_options",
    "apply_advancement",
    "completion_type",
    "create_initial_exercise_logs",
    "decode_token",
    "delete_account",
    "is_week_complete",
    "issue_token",
    "parse_target_sets",
    "previous_exercise_logs",
    "record_workout_progress",
    "reset_program_position",
    "session_from_slug",
    "session_to_slug",
    "sign_in",
    "update_settings",
    "variant_suggestions",
]
