"""Workout log data models."""

from dataclasses import dataclass, field
from datetime import datetime

from ..utils.date_utils import to_iso
from .program import SessionType


@dataclass
class SetLog:
    """One logged set.

    A set is measured by ``reps`` (bilateral), ``reps_left``/``reps_right``
    (unilateral) or ``time`` in seconds (timed). Which one applies comes from
    the program exercise definition; the fields are not mutually exclusive.
    """

    set_number: int
    reps: int = 0
    reps_left: int | None = None
    reps_right: int | None = None
    time: int | None = None
    completed: bool = False
    rpe: float | None = None
    notes: str | None = None

    @property
    def is_unilateral(self) -> bool:
        return self.reps_left is not None and self.reps_right is not None

    def total_reps(self) -> int:
        """Reps for this set, summing both sides for unilateral sets."""
        if self.is_unilateral:
            return self.reps_left + self.reps_right
        return self.reps or 0

    def best_side(self) -> int:
        """Best single-side reps (plain reps for bilateral sets)."""
        if self.is_unilateral:
            return max(self.reps_left, self.reps_right)
        return self.reps or 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "setNumber": self.set_number,
            "reps": self.reps,
            "completed": self.completed,
        }
        for key, value in (
            ("repsLeft", self.reps_left),
            ("repsRight", self.reps_right),
            ("time", self.time),
            ("rpe", self.rpe),
            ("notes", self.notes),
        ):
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SetLog":
        """Create from dictionary."""
        return cls(
            set_number=data.get("setNumber", 1),
            reps=data.get("reps") or 0,
            reps_left=data.get("repsLeft"),
            reps_right=data.get("repsRight"),
            time=data.get("time"),
            completed=bool(data.get("completed", False)),
            rpe=data.get("rpe"),
            notes=data.get("notes"),
        )


@dataclass
class ExerciseProgression:
    """Free-text description of how an exercise was made easier or harder."""

    variant: str = ""  # e.g. "Band assisted", "Negative only", "Full ROM"
    ring_height: str | None = None  # strap number or landmark
    added_weight: float | None = None
    notes: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {"variant": self.variant}
        if self.ring_height is not None:
            data["ringHeight"] = self.ring_height
        if self.added_weight is not None:
            data["addedWeight"] = self.added_weight
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict | None) -> "ExerciseProgression":
        """Create from dictionary."""
        data = data or {}
        return cls(
            variant=data.get("variant") or "",
            ring_height=data.get("ringHeight"),
            added_weight=data.get("addedWeight"),
            notes=data.get("notes"),
        )


@dataclass
class ExerciseLog:
    """Logged sets for one exercise of a workout."""

    letter: str
    exercise_name: str
    progression: ExerciseProgression = field(default_factory=ExerciseProgression)
    sets: list[SetLog] = field(default_factory=list)
    notes: str | None = None

    def completed_sets(self) -> list[SetLog]:
        return [s for s in self.sets if s.completed]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "letter": self.letter,
            "exerciseName": self.exercise_name,
            "progression": self.progression.to_dict(),
            "sets": [s.to_dict() for s in self.sets],
        }
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseLog":
        """Create from dictionary."""
        return cls(
            letter=data.get("letter", ""),
            exercise_name=data.get("exerciseName", ""),
            progression=ExerciseProgression.from_dict(data.get("progression")),
            sets=[SetLog.from_dict(s) for s in data.get("sets", [])],
            notes=data.get("notes"),
        )


@dataclass
class Workout:
    """A logged (or in-progress) training session."""

    user_id: int
    date: datetime
    phase: int
    week: int
    session: SessionType
    is_deload: bool = False
    exercises: list[ExerciseLog] = field(default_factory=list)
    notes: str | None = None
    duration: int | None = None  # minutes
    is_seed: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    id: int | None = None

    def to_client_dict(self) -> dict:
        """Plain-JSON client representation (string id, ISO dates)."""
        return {
            "id": str(self.id) if self.id is not None else None,
            "date": to_iso(self.date),
            "phase": self.phase,
            "week": self.week,
            "session": self.session.value,
            "isDeload": self.is_deload,
            "exercises": [e.to_dict() for e in self.exercises],
            "notes": self.notes,
            "duration": self.duration,
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }
