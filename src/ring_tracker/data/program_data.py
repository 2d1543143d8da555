"""The 18-week rings program: phases, sessions, exercise library and schedule.

All tables are built once at import time and never mutated.
"""

from datetime import date

from ..models.program import (
    ExerciseCategory,
    ExerciseDefinition,
    ProgramExercise,
    ProgramPhase,
    ProgramSession,
    SessionType,
)

PUSH_1 = SessionType.PUSH_1
PULL_1 = SessionType.PULL_1
PUSH_2 = SessionType.PUSH_2
PULL_2 = SessionType.PULL_2


def _ex(letter, name, sets, reps, tempo, rest, **flags) -> ProgramExercise:
    return ProgramExercise(
        letter=letter,
        name=name,
        target_sets=sets,
        target_reps=reps,
        tempo=tempo,
        rest=rest,
        **flags,
    )


def _deload(
    exercises: list[ProgramExercise],
    set_targets: dict[str, str],
    default: str | None = None,
) -> list[ProgramExercise]:
    """Reduce set targets for the deload week.

    Targets found in ``set_targets`` are replaced; others become ``default``
    (or stay unchanged when ``default`` is None).
    """
    reduced = []
    for ex in exercises:
        if ex.target_sets in set_targets:
            target = set_targets[ex.target_sets]
        elif default is not None:
            target = default
        else:
            target = ex.target_sets
        reduced.append(ex.with_sets(target))
    return reduced


# Phase 1: Foundation
_P1_PUSH_1 = [
    _ex("A1", "Ring Dip (Elbows in)", "3-4", "6-8", "30X1", "1:30"),
    _ex("B1", "Archer Pushup (Alternating)", "3-4", "4-6 L&R", "20X0", "1:30", is_unilateral=True),
    _ex("C1", "Chest Fly", "3", "8-10", "30X0", "1:30"),
    _ex("D1", "Tricep Dip", "3", "6-10", "20X0", "1:30"),
    _ex("E1", "Tricep Extension", "3", "8-10", "30X1", "1:30"),
]

_P1_PULL_1 = [
    _ex("A1", "Chinup (Regular/Tuck L/L-Sit)", "3-5", "6-8", "30X2", "2:00-3:00"),
    _ex("B1", "Bodyweight Row (Two arms)", "3-4", "10-15 L&R", "20X1", "1:30", is_unilateral=True),
    _ex("C1", "Pelican Curl", "3", "5-8", "30X0", "1:30"),
    _ex("D1", "Face Pull", "3", "8-10", "30X0", "1:30"),
    _ex("E1", "Ring Rollout", "3", "8-10", "40X0", "1:30"),
]

_P1_PUSH_2 = [
    _ex("A1", "Ring Dip (Elbows in)", "3-4", "6-8", "30X1", "1:30"),
    _ex("B1", "Shoulder Pushup (Feet on floor)", "3-4", "4-8", "30X1", "1:30"),
    _ex("C1", "Bulgarian Pushup", "3-4", "6-10", "20X0", "1:30"),
    _ex("D1", "Shoulder Shrug (Back to wall)", "3-4", "8-12", "2s iso", "1:30", is_timed=True),
    _ex("E1", "Tricep Dip", "3", "6-10", "20X0", "1:30"),
]

_P1_PULL_2 = [
    _ex("A1", "Mantle Chinup", "3-5", "4-6 L&R", "30X2", "1:30", is_unilateral=True),
    _ex("B1", "Archer Bodyweight Row", "3-4", "4-8 L&R", "20X0", "1:30", is_unilateral=True),
    _ex("C1", "Face Pull", "3", "8-10", "20X0", "1:30"),
    _ex("D1", "Bodyweight Bicep Curl", "3-4", "8-10", "30X1", "1:30"),
]

# Phase 2: Development
_P2_PUSH_1 = [
    _ex("A1", "Ring Dip (Elbows in)", "3-4", "8-10", "30X1", "1:30"),
    _ex("B1", "Archer Pushup (Alternating)", "3-4", "6-8 L&R", "20X0", "1:30", is_unilateral=True),
    _ex("C1", "Chest Fly", "3", "8-12", "30X0", "1:30"),
    _ex("D1", "Tricep Dip", "3", "8-15", "30X0", "1:30"),
    _ex("E1", "Tricep Extension", "3-4", "8-12", "30X1", "1:30"),
    _ex("F1", "Diamond Pushup (Feet Elevated)", "1", "8-15! Down", "30X1", "self", is_down_series=True),
]

_P2_PULL_1 = [
    _ex("A1", "Wide Pullup (Tuck L)", "3-4", "6-12", "30X0", "2:00-3:00"),
    _ex("B1", "Archer Bodyweight Row", "3-4", "6-8 L&R", "20X0", "1:30", is_unilateral=True),
    _ex("C1", "Pelican Curl", "3", "6-10", "30X0", "1:30"),
    _ex("D1", "Rear Delt Fly", "3", "8-12", "30X0", "1:30"),
    _ex("E1", "Ring Rollout", "3", "10-12", "40X0", "1:30"),
]

_P2_PUSH_2 = [
    _ex("A1", "Ring Dip (Bulgarian)", "3-4", "5-8", "30X1", "1:30"),
    _ex("B1", "Shoulder Pushup (Feet elevated)", "3-4", "6-10", "40X1", "1:30"),
    _ex("C1", "Bulgarian Pushup", "3-4", "8-10", "30X1", "1:30"),
    _ex("D1", "Shoulder Tap (Chest to wall)", "3-4", "30-45s", "-", "1:30", is_timed=True),
    _ex("E1", "Tricep Dip", "3-4", "6-10", "20X0", "1:30"),
]

_P2_PULL_2 = [
    _ex("A1", "Archer Chinup (Alternating)", "4-6", "3-5 L&R", "30X0", "1:30", is_unilateral=True),
    _ex("B1", "Single Arm Row", "3-4", "4-8 L&R", "30X0", "1:30", is_unilateral=True),
    _ex("C1", "Face Pull", "3-4", "8-12", "20X0", "1:30"),
    _ex("D1", "Bodyweight Bicep Curl", "3-4", "8-12", "30X1", "1:30"),
    _ex("E1", "Two Arm Hang", "self", "2:00-4:00", "Accumulation", "self", is_accumulation=True, is_timed=True),
]

# Phase 3: Peak Performance
_P3_PUSH_1 = [
    _ex("A1", "Handstand Pushup (Chest to wall)", "20 mins", "Accumulation", "30X1", "self", is_accumulation=True),
    _ex("B1", "Ring Dip (Bulgarian)", "3-5", "5-8", "30X1", "2:00"),
    _ex("C1", "Archer Pushup (Same Side)", "3-5", "6-8 L&R", "30X1", "2:00", is_unilateral=True),
    _ex("D1", "Chest Fly", "4-5", "6-8", "30X0", "2:00"),
    _ex("E1", "Tricep Extension", "5-6", "5-6", "30X1", "2:00"),
    _ex("F1", "Tricep Dip", "3-4", "8-12", "30X0", "2:00"),
]

_P3_PULL_1 = [
    _ex("A1", "Wide Pullup (L-Sit)", "3-5", "5-8", "30X0", "2:00-3:00"),
    _ex("B1", "L-Row", "3-5", "3-8", "30X0", "2:00"),
    _ex("C1", "Pelican Curl", "3-4", "6-10", "40X0", "2:00"),
    _ex("D1", "Rear Delt Fly", "3-4", "8-15", "30X0", "2:00"),
    _ex("E1", "Ring Rollout", "3", "10-15", "40X1", "2:00"),
]

_P3_PUSH_2 = [
    _ex("A1", "Ring Dip (Elbows in)", "3-5", "8-12", "30X1", "2:00"),
    _ex("B1", "Shoulder Pushup (Feet Elevated)", "3-5", "6-10", "30X1", "2:00"),
    _ex("C1", "Bulgarian Pushup", "3-5", "10-15", "30X1", "2:00"),
    _ex("D1", "Waist Tap (Chest to wall)", "3-5", "30-45s", "-", "2:00", is_timed=True),
    _ex("E1", "Tricep Dip", "3-4", "10-12", "30X1", "2:00"),
    _ex("F1", "Diamond Pushup (Feet Elevated)", "2", "8-12! Down", "30X1", "self", is_down_series=True),
]

_P3_PULL_2 = [
    _ex("A1", "Archer Chinup (Same side)", "3-5", "4-8 L&R", "30X1", "1:30", is_unilateral=True),
    _ex("B1", "Single Arm Row", "3-5", "6-10 L&R", "30X0", "2:00", is_unilateral=True),
    _ex("C1", "Face Pull", "3-4", "8-12", "20X0", "2:00"),
    _ex("D1", "Pelican Curl Negative", "3", "3-4", "6-8s", "2:00"),
    _ex("E1", "Bodyweight Bicep Curl", "3-4", "6-10", "30X1", "2:00"),
    _ex("F1", "One Arm Hang", "self", "2:00-4:00", "Accumulation", "self", is_accumulation=True, is_timed=True),
]

# Deload weeks: same exercises at reduced volume. Some sessions also drop
# the accumulation or down-series slot.
_P1_DELOAD = {
    PUSH_1: _deload(_P1_PUSH_1, {"3-4": "1-2"}, default="2"),
    PULL_1: _deload(_P1_PULL_1, {"3-5": "1-2", "3-4": "1-2"}, default="2"),
    PUSH_2: _deload(_P1_PUSH_2, {"3-4": "1-2"}, default="2"),
    PULL_2: _deload(_P1_PULL_2, {"3-5": "1-2", "3-4": "1-2"}, default="2"),
}

_P2_DELOAD = {
    PUSH_1: _deload(_P2_PUSH_1[:-1], {"3-4": "1-2"}, default="2"),
    PULL_1: _deload(_P2_PULL_1, {"3-4": "1-2"}, default="2"),
    PUSH_2: _deload(_P2_PUSH_2, {"3-4": "1-2"}, default="2"),
    PULL_2: _deload(_P2_PULL_2[:-1], {"4-6": "2", "3-4": "2"}, default="self"),
}

_P3_DELOAD = {
    PUSH_1: _deload(_P3_PUSH_1[1:], {"3-5": "2", "4-5": "2", "5-6": "2", "3-4": "1-2"}, default="2"),
    PULL_1: _deload(_P3_PULL_1, {"3-5": "2", "3-4": "2", "3": "1-2"}),
    PUSH_2: _deload(_P3_PUSH_2[:-1], {"3-5": "2", "3-4": "1-2"}),
    PULL_2: _deload(_P3_PULL_2[:-1], {"3-5": "2", "3-4": "2", "3": "1-2"}),
}


def _sessions(table: dict[SessionType, list[ProgramExercise]]) -> dict[SessionType, ProgramSession]:
    return {name: ProgramSession(name=name, exercises=tuple(exs)) for name, exs in table.items()}


PROGRAM_PHASES: tuple[ProgramPhase, ...] = (
    ProgramPhase(
        phase=1,
        name="Foundation",
        weeks=6,
        sessions=_sessions(
            {PUSH_1: _P1_PUSH_1, PULL_1: _P1_PULL_1, PUSH_2: _P1_PUSH_2, PULL_2: _P1_PULL_2}
        ),
        deload_sessions=_sessions(_P1_DELOAD),
    ),
    ProgramPhase(
        phase=2,
        name="Development",
        weeks=6,
        sessions=_sessions(
            {PUSH_1: _P2_PUSH_1, PULL_1: _P2_PULL_1, PUSH_2: _P2_PUSH_2, PULL_2: _P2_PULL_2}
        ),
        deload_sessions=_sessions(_P2_DELOAD),
    ),
    ProgramPhase(
        phase=3,
        name="Peak Performance",
        weeks=6,
        sessions=_sessions(
            {PUSH_1: _P3_PUSH_1, PULL_1: _P3_PULL_1, PUSH_2: _P3_PUSH_2, PULL_2: _P3_PULL_2}
        ),
        deload_sessions=_sessions(_P3_DELOAD),
    ),
)


def _def(name, category, muscles, tempo, progressions) -> ExerciseDefinition:
    return ExerciseDefinition(
        name=name,
        category=category,
        muscle_groups=tuple(muscles),
        default_tempo=tempo,
        example_progressions=tuple(progressions),
    )


_PUSH = ExerciseCategory.PUSH
_PULL = ExerciseCategory.PULL

EXERCISE_DEFINITIONS: tuple[ExerciseDefinition, ...] = (
    # Push exercises
    _def("Ring Dip (Elbows in)", _PUSH, ["Chest", "Triceps", "Shoulders"], "30X1",
         ["Band assisted", "Negative only", "Full ROM", "RTO at top", "Weighted"]),
    _def("Ring Dip (Bulgarian)", _PUSH, ["Chest", "Triceps", "Shoulders"], "30X1",
         ["Partial ROM", "Full ROM", "Weighted"]),
    _def("Archer Pushup (Alternating)", _PUSH, ["Chest", "Triceps", "Shoulders"], "20X0",
         ["On knees", "Full", "Weighted vest"]),
    _def("Archer Pushup (Same Side)", _PUSH, ["Chest", "Triceps", "Shoulders"], "30X1",
         ["Partial ROM", "Full ROM"]),
    _def("Chest Fly", _PUSH, ["Chest"], "30X0", ["High rings", "Low rings", "Feet elevated"]),
    _def("Tricep Dip", _PUSH, ["Triceps"], "20X0", ["Feet on floor", "Legs straight", "Elevated"]),
    _def("Tricep Extension", _PUSH, ["Triceps"], "30X1", ["High rings", "Low rings"]),
    _def("Shoulder Pushup (Feet on floor)", _PUSH, ["Shoulders"], "30X1",
         ["Pike", "Feet elevated", "Wall assisted"]),
    _def("Shoulder Pushup (Feet elevated)", _PUSH, ["Shoulders"], "40X1",
         ["Low elevation", "High elevation", "Box"]),
    _def("Bulgarian Pushup", _PUSH, ["Chest", "Shoulders"], "20X0",
         ["Low rings", "Medium rings", "High rings"]),
    _def("Shoulder Shrug (Back to wall)", _PUSH, ["Shoulders", "Traps"], "2s iso",
         ["Partial", "Full shrug"]),
    _def("Shoulder Tap (Chest to wall)", _PUSH, ["Shoulders", "Core"], "-",
         ["Quick taps", "Slow holds"]),
    _def("Waist Tap (Chest to wall)", _PUSH, ["Shoulders", "Core"], "-",
         ["Quick taps", "Slow holds"]),
    _def("Diamond Pushup (Feet Elevated)", _PUSH, ["Triceps", "Chest"], "30X1",
         ["Floor", "Low elevation", "High elevation"]),
    _def("Handstand Pushup (Chest to wall)", _PUSH, ["Shoulders", "Triceps"], "30X1",
         ["Negatives only", "Partial ROM", "Full ROM", "Deficit"]),
    # Pull exercises
    _def("Chinup (Regular/Tuck L/L-Sit)", _PULL, ["Back", "Biceps"], "30X2",
         ["Band assisted", "Regular", "Tuck L", "L-Sit", "Weighted"]),
    _def("Wide Pullup (Tuck L)", _PULL, ["Back", "Biceps"], "30X0",
         ["Regular grip", "Wide grip", "Tuck L"]),
    _def("Wide Pullup (L-Sit)", _PULL, ["Back", "Biceps", "Core"], "30X0",
         ["Tuck L", "Straddle L", "Full L-Sit"]),
    _def("Mantle Chinup", _PULL, ["Back", "Biceps"], "30X2", ["Assisted", "Full"]),
    _def("Archer Chinup (Alternating)", _PULL, ["Back", "Biceps"], "30X0",
         ["Band assisted", "Full ROM"]),
    _def("Archer Chinup (Same side)", _PULL, ["Back", "Biceps"], "30X1", ["Partial", "Full ROM"]),
    _def("Bodyweight Row (Two arms)", _PULL, ["Back", "Biceps"], "20X1",
         ["High rings", "Low rings", "Feet elevated"]),
    _def("Archer Bodyweight Row", _PULL, ["Back", "Biceps"], "20X0", ["High rings", "Low rings"]),
    _def("Single Arm Row", _PULL, ["Back", "Biceps"], "30X0", ["High rings", "Low rings"]),
    _def("L-Row", _PULL, ["Back", "Biceps", "Core"], "30X0", ["Tuck", "Straddle", "Full L"]),
    _def("Pelican Curl", _PULL, ["Biceps"], "30X0", ["Partial ROM", "Full ROM", "Slow eccentric"]),
    _def("Pelican Curl Negative", _PULL, ["Biceps"], "6-8s",
         ["4s negative", "6s negative", "8s negative"]),
    _def("Face Pull", _PULL, ["Rear Delts", "Traps"], "30X0", ["Light angle", "Steep angle"]),
    _def("Rear Delt Fly", _PULL, ["Rear Delts"], "30X0", ["High rings", "Low rings"]),
    _def("Ring Rollout", _PULL, ["Core", "Lats"], "40X0", ["Knees", "Toes", "Standing"]),
    _def("Bodyweight Bicep Curl", _PULL, ["Biceps"], "30X1", ["High rings", "Low rings"]),
    _def("Two Arm Hang", _PULL, ["Grip", "Shoulders"], "Accumulation", ["Dead hang", "Active hang"]),
    _def("One Arm Hang", _PULL, ["Grip", "Shoulders"], "Accumulation", ["Assisted", "Full"]),
)

REST_DAY = "Rest"

# Recommended weekday -> session ("Rest" on off days)
WEEKLY_SCHEDULE: dict[str, str] = {
    "monday": PUSH_1.value,
    "tuesday": REST_DAY,
    "wednesday": PULL_1.value,
    "thursday": REST_DAY,
    "friday": PUSH_2.value,
    "saturday": PULL_2.value,
    "sunday": REST_DAY,
}

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def get_phase(phase: int) -> ProgramPhase | None:
    """Get a phase by number (1-3)."""
    for p in PROGRAM_PHASES:
        if p.phase == phase:
            return p
    return None


def get_session_for_phase(
    phase: int, session: SessionType | str, is_deload: bool = False
) -> ProgramSession | None:
    """Get the prescribed session for a phase, or its deload version."""
    phase_data = get_phase(phase)
    if phase_data is None:
        return None
    try:
        session_type = SessionType(session)
    except ValueError:
        return None
    return phase_data.get_session(session_type, is_deload)


def get_exercise_definition(name: str) -> ExerciseDefinition | None:
    """Exact, case-sensitive lookup in the exercise library."""
    for definition in EXERCISE_DEFINITIONS:
        if definition.name == name:
            return definition
    return None


def find_exercise_definition(name: str) -> ExerciseDefinition | None:
    """Case-insensitive lookup, for names recovered from URL slugs."""
    lowered = name.lower()
    for definition in EXERCISE_DEFINITIONS:
        if definition.name.lower() == lowered:
            return definition
    return None


def get_all_exercise_names() -> list[str]:
    return [d.name for d in EXERCISE_DEFINITIONS]


def get_exercises_by_category(category: ExerciseCategory | str) -> list[ExerciseDefinition]:
    category = ExerciseCategory(category)
    return [d for d in EXERCISE_DEFINITIONS if d.category == category]


def get_session_for_day(day: date) -> SessionType | None:
    """Recommended session for a calendar day, or None on rest days."""
    scheduled = WEEKLY_SCHEDULE[_WEEKDAYS[day.weekday()]]
    if scheduled == REST_DAY:
        return None
    return SessionType(scheduled)


def get_exercise_appearances(name: str) -> list[dict]:
    """Phases and (non-deload) sessions in which an exercise is programmed."""
    appearances = []
    for phase in PROGRAM_PHASES:
        sessions = [
            session_type.value
            for session_type, session in phase.sessions.items()
            if any(ex.name == name for ex in session.exercises)
        ]
        if sessions:
            appearances.append({"phase": phase.phase, "sessions": sessions})
    return appearances


def program_to_dict() -> dict:
    """The full static catalog as served by the program endpoint."""
    return {
        "phases": [p.to_dict() for p in PROGRAM_PHASES],
        "exercises": [d.to_dict() for d in EXERCISE_DEFINITIONS],
        "weeklySchedule": dict(WEEKLY_SCHEDULE),
    }
