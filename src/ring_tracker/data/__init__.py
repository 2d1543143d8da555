"""Static program catalog."""

from .program_data import (
    EXERCISE_DEFINITIONS,
    PROGRAM_PHASES,
    WEEKLY_SCHEDULE,
    find_exercise_definition,
    get_all_exercise_names,
    get_exercise_appearances,
    get_exercise_definition,
    get_exercises_by_category,
    get_phase,
    get_session_for_day,
    get_session_for_phase,
    program_to_dict,
)

__all__ = [
    "EXERCISE_DEFINITIONS",
    "PROGRAM_PHASES",
    "WEEKLY_SCHEDULE",
    "find_exercise_definition",
    "get_all_exercise_names",
    "get_exercise_appearances",
    "get_exercise_definition",
    "get_exercises_by_category",
    "get_phase",
    "get_session_for_day",
    "get_session_for_phase",
    "program_to_dict",
]
