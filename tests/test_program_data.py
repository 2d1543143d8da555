"""Tests for the static program catalog."""

from datetime import date

from ring_tracker.data.program_data import (
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
from ring_tracker.models.program import ExerciseCategory, SessionType


class TestPhases:
    """Tests for phases and sessions."""

    def test_three_phases(self):
        assert [p.phase for p in PROGRAM_PHASES] == [1, 2, 3]
        assert [p.name for p in PROGRAM_PHASES] == [
            "Foundation",
            "Development",
            "Peak Performance",
        ]

    def test_every_phase_has_all_sessions(self):
        for phase in PROGRAM_PHASES:
            assert set(phase.sessions) == set(SessionType)
            assert set(phase.deload_sessions) == set(SessionType)

    def test_get_phase(self):
        assert get_phase(2).name == "Development"
        assert get_phase(4) is None
        assert get_phase(0) is None

    def test_get_session_for_phase(self):
        session = get_session_for_phase(1, "Push 1")
        assert session.name == SessionType.PUSH_1
        first = session.exercises[0]
        assert first.letter == "A1"
        assert first.name == "Ring Dip (Elbows in)"
        assert first.target_sets == "3-4"
        assert first.target_reps == "6-8"

    def test_invalid_session_or_phase(self):
        assert get_session_for_phase(1, "Legs") is None
        assert get_session_for_phase(7, SessionType.PUSH_1) is None

    def test_deload_reduces_sets(self):
        regular = get_session_for_phase(1, SessionType.PUSH_1)
        deload = get_session_for_phase(1, SessionType.PUSH_1, is_deload=True)
        assert [e.name for e in deload.exercises] == [e.name for e in regular.exercises]
        assert deload.exercises[0].target_sets == "1-2"
        assert deload.exercises[2].target_sets == "2"

    def test_deload_drops_slots(self):
        regular = get_session_for_phase(2, SessionType.PUSH_1)
        deload = get_session_for_phase(2, SessionType.PUSH_1, is_deload=True)
        assert len(deload.exercises) == len(regular.exercises) - 1
        assert "Diamond Pushup (Feet Elevated)" not in [e.name for e in deload.exercises]

        p3_deload = get_session_for_phase(3, SessionType.PUSH_1, is_deload=True)
        assert p3_deload.exercises[0].name == "Ring Dip (Bulgarian)"

    def test_flags(self):
        pull_2 = get_session_for_phase(2, SessionType.PULL_2)
        hang = pull_2.exercises[-1]
        assert hang.name == "Two Arm Hang"
        assert hang.is_accumulation and hang.is_timed
        assert pull_2.exercises[0].is_unilateral

    def test_catalog_is_immutable(self):
        session = get_session_for_phase(1, SessionType.PULL_1)
        assert isinstance(session.exercises, tuple)


class TestExerciseLibrary:
    """Tests for exercise definitions."""

    def test_library_size(self):
        assert len(EXERCISE_DEFINITIONS) == 33
        assert len(get_all_exercise_names()) == 33

    def test_exact_lookup_is_case_sensitive(self):
        assert get_exercise_definition("Chest Fly").category == ExerciseCategory.PUSH
        assert get_exercise_definition("chest fly") is None

    def test_find_is_case_insensitive(self):
        definition = find_exercise_definition("ring dip (elbows in)")
        assert definition.name == "Ring Dip (Elbows in)"
        assert "Full ROM" in definition.example_progressions

    def test_by_category(self):
        pull = get_exercises_by_category("Pull")
        assert all(d.category == ExerciseCategory.PULL for d in pull)
        push = get_exercises_by_category(ExerciseCategory.PUSH)
        assert len(pull) + len(push) == len(EXERCISE_DEFINITIONS)

    def test_appearances(self):
        appearances = get_exercise_appearances("Face Pull")
        assert [a["phase"] for a in appearances] == [1, 2, 3]
        assert appearances[0]["sessions"] == ["Pull 1", "Pull 2"]

    def test_appearances_unknown(self):
        assert get_exercise_appearances("Burpee") == []


class TestSchedule:
    """Tests for the weekly schedule."""

    def test_schedule(self):
        assert WEEKLY_SCHEDULE["monday"] == "Push 1"
        assert WEEKLY_SCHEDULE["saturday"] == "Pull 2"
        assert WEEKLY_SCHEDULE["sunday"] == "Rest"

    def test_session_for_day(self):
        assert get_session_for_day(date(2024, 6, 10)) == SessionType.PUSH_1  # Monday
        assert get_session_for_day(date(2024, 6, 12)) == SessionType.PULL_1  # Wednesday
        assert get_session_for_day(date(2024, 6, 11)) is None  # Tuesday
        assert get_session_for_day(date(2024, 6, 16)) is None  # Sunday


class TestProgramToDict:
    """Tests for the catalog wire format."""

    def test_shape(self):
        data = program_to_dict()
        assert set(data) == {"phases", "exercises", "weeklySchedule"}
        phase = data["phases"][0]
        assert set(phase["sessions"]) == {"Push 1", "Pull 1", "Push 2", "Pull 2"}
        exercise = phase["sessions"]["Push 1"]["exercises"][1]
        assert exercise["targetSets"] == "3-4"
        assert exercise["isUnilateral"] is True
        assert "isTimed" not in exercise
