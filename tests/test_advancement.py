"""Tests for week/phase advancement."""

from ring_tracker.models.program import SessionType
from ring_tracker.models.user import UserSettings, WeightUnit
from ring_tracker.services.advancement import (
    SESSION_TYPES,
    CompletionType,
    advancement_options,
    apply_advancement,
    completion_type,
    is_week_complete,
)


class TestWeekComplete:
    """Tests for completion detection."""

    def test_all_four_sessions(self):
        assert SESSION_TYPES == ("Push 1", "Pull 1", "Push 2", "Pull 2")
        assert is_week_complete(["Pull 2", "Push 1", "Push 2", "Pull 1"])

    def test_missing_session(self):
        assert not is_week_complete(["Push 1", "Pull 1", "Push 2"])

    def test_duplicates_do_not_count_twice(self):
        assert not is_week_complete(["Push 1", "Push 1", "Pull 1", "Pull 1"])

    def test_accepts_session_types(self):
        assert is_week_complete(list(SessionType))

    def test_empty(self):
        assert not is_week_complete([])


class TestCompletionType:
    """Tests for what a finished week completes."""

    def test_training_week(self):
        assert completion_type(1, 1) == CompletionType.WEEK
        assert completion_type(3, 5) == CompletionType.WEEK

    def test_deload_week(self):
        assert completion_type(1, 6) == CompletionType.PHASE
        assert completion_type(2, 6) == CompletionType.PHASE

    def test_program_end(self):
        assert completion_type(3, 6) == CompletionType.PROGRAM


class TestOptions:
    """Tests for offered advancement options."""

    def test_week(self):
        options = advancement_options(1, 3)
        assert [(o.phase, o.week) for o in options] == [(1, 4)]
        assert options[0].label == "Move to Week 4"

    def test_phase(self):
        options = advancement_options(1, 6)
        assert [(o.phase, o.week) for o in options] == [(1, 1), (2, 1)]
        assert options[0].label == "Repeat Phase 1"
        assert options[1].label == "Start Phase 2: Development"

    def test_program(self):
        options = advancement_options(3, 6)
        assert [(o.phase, o.week) for o in options] == [(1, 1)]

    def test_apply_keeps_other_settings(self):
        settings = UserSettings(current_phase=1, current_week=6, weight_unit=WeightUnit.LBS)
        option = advancement_options(1, 6)[1]
        updated = apply_advancement(settings, option)

        assert (updated.current_phase, updated.current_week) == (2, 1)
        assert updated.weight_unit == WeightUnit.LBS
        assert settings.current_phase == 1
