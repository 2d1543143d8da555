"""Per-exercise progress and variant usage models.

These documents live in the ``exercise_progress`` and ``user_variants``
collections. They are owned by a user and removed with the account.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..utils.date_utils import parse_datetime, to_iso


@dataclass
class ProgressDataPoint:
    """Summary of one workout's performance on an exercise."""

    date: datetime
    phase: int
    week: int
    variant: str
    total_sets: int
    total_reps: int
    avg_reps_per_set: float
    total_volume: float
    best_set: int
    ring_height: str | None = None
    added_weight: float | None = None
    notes: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": to_iso(self.date),
            "phase": self.phase,
            "week": self.week,
            "variant": self.variant,
            "ringHeight": self.ring_height,
            "addedWeight": self.added_weight,
            "totalSets": self.total_sets,
            "totalReps": self.total_reps,
            "avgRepsPerSet": self.avg_reps_per_set,
            "totalVolume": self.total_volume,
            "bestSet": self.best_set,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgressDataPoint":
        """Create from dictionary."""
        return cls(
            date=parse_datetime(data["date"]),
            phase=data["phase"],
            week=data["week"],
            variant=data.get("variant", ""),
            ring_height=data.get("ringHeight"),
            added_weight=data.get("addedWeight"),
            total_sets=data.get("totalSets", 0),
            total_reps=data.get("totalReps", 0),
            avg_reps_per_set=data.get("avgRepsPerSet", 0.0),
            total_volume=data.get("totalVolume", 0),
            best_set=data.get("bestSet", 0),
            notes=data.get("notes"),
        )


@dataclass
class DatedValue:
    value: float
    date: datetime

    def to_dict(self) -> dict:
        return {"value": self.value, "date": to_iso(self.date)}

    @classmethod
    def from_dict(cls, data: dict) -> "DatedValue":
        return cls(value=data["value"], date=parse_datetime(data["date"]))


@dataclass
class PersonalBest:
    """Best values recorded for one exercise variant."""

    max_reps: DatedValue
    max_volume: DatedValue
    max_sets: DatedValue
    longest_hold: DatedValue | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "maxReps": self.max_reps.to_dict(),
            "maxVolume": self.max_volume.to_dict(),
            "maxSets": self.max_sets.to_dict(),
        }
        if self.longest_hold is not None:
            data["longestHold"] = self.longest_hold.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "PersonalBest":
        """Create from dictionary."""
        longest_hold = None
        if data.get("longestHold"):
            longest_hold = DatedValue.from_dict(data["longestHold"])
        return cls(
            max_reps=DatedValue.from_dict(data["maxReps"]),
            max_volume=DatedValue.from_dict(data["maxVolume"]),
            max_sets=DatedValue.from_dict(data["maxSets"]),
            longest_hold=longest_hold,
        )


@dataclass
class CurrentProgression:
    """The variant a user is currently training for an exercise."""

    variant: str
    last_used: datetime
    avg_reps: float
    avg_sets: float
    ring_height: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "variant": self.variant,
            "ringHeight": self.ring_height,
            "lastUsed": to_iso(self.last_used),
            "avgReps": self.avg_reps,
            "avgSets": self.avg_sets,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CurrentProgression":
        """Create from dictionary."""
        return cls(
            variant=data["variant"],
            ring_height=data.get("ringHeight"),
            last_used=parse_datetime(data["lastUsed"]),
            avg_reps=data.get("avgReps", 0.0),
            avg_sets=data.get("avgSets", 0.0),
        )


@dataclass
class ExerciseProgress:
    """Accumulated progress for one exercise of one user."""

    user_id: int
    exercise_name: str
    current_progression: CurrentProgression
    history: list[ProgressDataPoint] = field(default_factory=list)
    used_variants: list[str] = field(default_factory=list)
    personal_bests: dict[str, PersonalBest] = field(default_factory=dict)
    updated_at: datetime | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert the document body to a dictionary."""
        return {
            "history": [p.to_dict() for p in self.history],
            "usedVariants": list(self.used_variants),
            "personalBests": {k: v.to_dict() for k, v in self.personal_bests.items()},
            "currentProgression": self.current_progression.to_dict(),
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        user_id: int,
        exercise_name: str,
        id: int | None = None,
        updated_at: datetime | None = None,
    ) -> "ExerciseProgress":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=user_id,
            exercise_name=exercise_name,
            history=[ProgressDataPoint.from_dict(p) for p in data.get("history", [])],
            used_variants=data.get("usedVariants", []),
            personal_bests={
                k: PersonalBest.from_dict(v)
                for k, v in data.get("personalBests", {}).items()
            },
            current_progression=CurrentProgression.from_dict(data["currentProgression"]),
            updated_at=updated_at,
        )


@dataclass
class VariantUsage:
    name: str
    times_used: int
    last_used: datetime

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "timesUsed": self.times_used,
            "lastUsed": to_iso(self.last_used),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "VariantUsage":
        return cls(
            name=data["name"],
            times_used=data.get("timesUsed", 0),
            last_used=parse_datetime(data["lastUsed"]),
        )


@dataclass
class UserVariants:
    """Variant names a user has typed for an exercise (for autocomplete)."""

    user_id: int
    exercise_name: str
    variants: list[VariantUsage] = field(default_factory=list)
    id: int | None = None

    def record(self, name: str, used_at: datetime) -> None:
        """Count one more use of ``name``."""
        for usage in self.variants:
            if usage.name == name:
                usage.times_used += 1
                usage.last_used = used_at
                return
        self.variants.append(VariantUsage(name=name, times_used=1, last_used=used_at))

    def most_used(self) -> list[str]:
        ranked = sorted(self.variants, key=lambda v: (-v.times_used, v.name))
        return [v.name for v in ranked]
