"""Static training program data models."""

from dataclasses import dataclass, field
from enum import Enum


class SessionType(str, Enum):
    """The four fixed workout sessions of a training week."""

    PUSH_1 = "Push 1"
    PULL_1 = "Pull 1"
    PUSH_2 = "Push 2"
    PULL_2 = "Pull 2"


class ExerciseCategory(str, Enum):
    """Exercise library category."""

    PUSH = "Push"
    PULL = "Pull"


@dataclass(frozen=True)
class ProgramExercise:
    """A lettered exercise slot within a program session."""

    letter: str
    name: str
    target_sets: str  # e.g. "3-4", "self", "20 mins"
    target_reps: str  # e.g. "6-8", "4-6 L&R", "30-45s"
    tempo: str  # e.g. "30X1"
    rest: str  # e.g. "1:30", "2:00-3:00", "self"
    is_unilateral: bool = False
    is_timed: bool = False
    is_accumulation: bool = False
    is_down_series: bool = False

    def with_sets(self, target_sets: str) -> "ProgramExercise":
        """Copy of this exercise with a different set target (used for deloads)."""
        return ProgramExercise(
            letter=self.letter,
            name=self.name,
            target_sets=target_sets,
            target_reps=self.target_reps,
            tempo=self.tempo,
            rest=self.rest,
            is_unilateral=self.is_unilateral,
            is_timed=self.is_timed,
            is_accumulation=self.is_accumulation,
            is_down_series=self.is_down_series,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "letter": self.letter,
            "name": self.name,
            "targetSets": self.target_sets,
            "targetReps": self.target_reps,
            "tempo": self.tempo,
            "rest": self.rest,
        }
        # Flags are only emitted when set
        if self.is_unilateral:
            data["isUnilateral"] = True
        if self.is_timed:
            data["isTimed"] = True
        if self.is_accumulation:
            data["isAccumulation"] = True
        if self.is_down_series:
            data["isDownSeries"] = True
        return data


@dataclass(frozen=True)
class ProgramSession:
    """An ordered list of exercises for one session type."""

    name: SessionType
    exercises: tuple[ProgramExercise, ...]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name.value,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }


@dataclass(frozen=True)
class ProgramPhase:
    """A six-week block of the program with its regular and deload sessions."""

    phase: int
    name: str
    weeks: int
    sessions: dict[SessionType, ProgramSession]
    deload_sessions: dict[SessionType, ProgramSession]

    def get_session(self, session: SessionType, is_deload: bool = False) -> ProgramSession | None:
        sessions = self.deload_sessions if is_deload else self.sessions
        return sessions.get(session)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "phase": self.phase,
            "name": self.name,
            "weeks": self.weeks,
            "sessions": {k.value: v.to_dict() for k, v in self.sessions.items()},
            "deloadSessions": {
                k.value: v.to_dict() for k, v in self.deload_sessions.items()
            },
        }


@dataclass(frozen=True)
class ExerciseDefinition:
    """An entry in the exercise library."""

    name: str
    category: ExerciseCategory
    muscle_groups: tuple[str, ...]
    default_tempo: str
    cues: tuple[str, ...] = field(default_factory=tuple)
    example_progressions: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "name": self.name,
            "category": self.category.value,
            "muscleGroups": list(self.muscle_groups),
            "defaultTempo": self.default_tempo,
        }
        if self.cues:
            data["cues"] = list(self.cues)
        if self.example_progressions:
            data["exampleProgressions"] = list(self.example_progressions)
        return data
