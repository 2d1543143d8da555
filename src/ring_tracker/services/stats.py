"""Read-only summaries derived from a window of fetched workouts.

Nothing here is persisted: every figure is recomputed from the workouts
passed in, so anything outside the fetched window is simply not counted.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..models.user import TOTAL_PHASES, WEEKS_PER_PHASE
from ..models.workout import ExerciseLog, Workout
from ..utils.date_utils import to_iso, week_start_key

DEFAULT_VARIANT = "Standard"
UNSPECIFIED_VARIANT = "Not specified"
TOTAL_WEEKS = TOTAL_PHASES * WEEKS_PER_PHASE


@dataclass
class WeeklyStats:
    week_start: str  # ISO date of the Monday
    workouts: int = 0
    total_sets: int = 0
    total_reps: int = 0

    def to_dict(self) -> dict:
        return {
            "weekStart": self.week_start,
            "workouts": self.workouts,
            "totalSets": self.total_sets,
            "totalReps": self.total_reps,
        }


@dataclass
class ExerciseStatsEntry:
    date: datetime
    sets: int
    reps: int
    variant: str

    def to_dict(self) -> dict:
        return {
            "date": to_iso(self.date),
            "sets": self.sets,
            "reps": self.reps,
            "variant": self.variant,
        }


@dataclass
class ExerciseStats:
    """Running totals for one exercise across the fetched workouts."""

    name: str
    total_sets: int
    total_reps: int
    avg_reps_per_set: float
    last_variant: str
    last_date: datetime
    history: list[ExerciseStatsEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "totalSets": self.total_sets,
            "totalReps": self.total_reps,
            "avgRepsPerSet": self.avg_reps_per_set,
            "lastVariant": self.last_variant,
            "lastDate": to_iso(self.last_date),
            "history": [h.to_dict() for h in self.history],
        }


@dataclass
class ExerciseHistoryEntry:
    """One workout's performance on a single exercise."""

    date: datetime
    phase: int
    week: int
    variant: str
    sets: int
    total_reps: int
    best_set: int

    def to_dict(self) -> dict:
        return {
            "date": to_iso(self.date),
            "phase": self.phase,
            "week": self.week,
            "variant": self.variant,
            "sets": self.sets,
            "totalReps": self.total_reps,
            "bestSet": self.best_set,
        }


@dataclass
class PersonalBests:
    max_reps: int = 0
    max_volume: int = 0
    max_sets: int = 0

    def to_dict(self) -> dict:
        return {
            "maxReps": self.max_reps,
            "maxVolume": self.max_volume,
            "maxSets": self.max_sets,
        }


@dataclass
class ProgramProgress:
    weeks_completed: int
    total_weeks: int
    percent: int

    def to_dict(self) -> dict:
        return {
            "weeksCompleted": self.weeks_completed,
            "totalWeeks": self.total_weeks,
            "percent": self.percent,
        }


def exercise_total_reps(log: ExerciseLog) -> int:
    """Reps over the completed sets of one exercise (both sides for unilateral)."""
    return sum(s.total_reps() for s in log.completed_sets())


def total_completed_sets(workouts: list[Workout]) -> int:
    return sum(len(e.completed_sets()) for w in workouts for e in w.exercises)


def total_reps(workouts: list[Workout]) -> int:
    return sum(exercise_total_reps(e) for w in workouts for e in w.exercises)


def total_duration(workouts: list[Workout]) -> int:
    """Sum of workout durations in minutes; missing durations count as 0."""
    return sum(w.duration or 0 for w in workouts)


def weekly_stats(workouts: list[Workout], limit: int = 8) -> list[WeeklyStats]:
    """Per-week totals keyed by the Monday of each week, oldest first.

    Only the most recent ``limit`` weeks are returned.
    """
    weeks: dict[str, WeeklyStats] = {}
    for workout in workouts:
        key = week_start_key(workout.date)
        stats = weeks.setdefault(key, WeeklyStats(week_start=key))
        stats.workouts += 1
        for exercise in workout.exercises:
            completed = exercise.completed_sets()
            stats.total_sets += len(completed)
            stats.total_reps += sum(s.total_reps() for s in completed)

    ordered = [weeks[k] for k in sorted(weeks)]
    if limit <= 0:
        return []
    return ordered[-limit:]


def exercise_stats(workouts: list[Workout]) -> list[ExerciseStats]:
    """Per-exercise totals, most-trained exercise first.

    Workouts are walked oldest first so history is chronological and the
    last variant is the most recent one given.
    """
    by_name: dict[str, ExerciseStats] = {}

    for workout in sorted(workouts, key=lambda w: w.date):
        for exercise in workout.exercises:
            completed = exercise.completed_sets()
            if not completed:
                continue

            reps = sum(s.total_reps() for s in completed)
            variant = exercise.progression.variant
            entry = ExerciseStatsEntry(
                date=workout.date,
                sets=len(completed),
                reps=reps,
                variant=variant or DEFAULT_VARIANT,
            )

            stats = by_name.get(exercise.exercise_name)
            if stats is None:
                by_name[exercise.exercise_name] = ExerciseStats(
                    name=exercise.exercise_name,
                    total_sets=len(completed),
                    total_reps=reps,
                    avg_reps_per_set=round(reps / len(completed), 1),
                    last_variant=variant or DEFAULT_VARIANT,
                    last_date=workout.date,
                    history=[entry],
                )
                continue

            stats.total_sets += len(completed)
            stats.total_reps += reps
            stats.avg_reps_per_set = round(stats.total_reps / stats.total_sets, 1)
            stats.last_variant = variant or stats.last_variant
            stats.last_date = workout.date
            stats.history.append(entry)

    return sorted(by_name.values(), key=lambda s: s.total_sets, reverse=True)


def exercise_history(workouts: list[Workout], exercise_name: str) -> list[ExerciseHistoryEntry]:
    """History of one exercise, in the order the workouts were given."""
    history = []
    for workout in workouts:
        log = next((e for e in workout.exercises if e.exercise_name == exercise_name), None)
        if log is None:
            continue
        completed = log.completed_sets()
        if not completed:
            continue
        history.append(
            ExerciseHistoryEntry(
                date=workout.date,
                phase=workout.phase,
                week=workout.week,
                variant=log.progression.variant or UNSPECIFIED_VARIANT,
                sets=len(completed),
                total_reps=sum(s.total_reps() for s in completed),
                best_set=max(s.best_side() for s in completed),
            )
        )
    return history


def personal_bests(history: list[ExerciseHistoryEntry]) -> PersonalBests:
    return PersonalBests(
        max_reps=max((h.best_set for h in history), default=0),
        max_volume=max((h.total_reps for h in history), default=0),
        max_sets=max((h.sets for h in history), default=0),
    )


def unique_variants(history: list[ExerciseHistoryEntry]) -> list[str]:
    """Distinct variants in first-seen order."""
    return list(dict.fromkeys(h.variant for h in history))


def program_progress(phase: int, week: int) -> ProgramProgress:
    """How far through the 18-week program a phase/week position is."""
    weeks_completed = (phase - 1) * WEEKS_PER_PHASE + week - 1
    return ProgramProgress(
        weeks_completed=weeks_completed,
        total_weeks=TOTAL_WEEKS,
        percent=round(weeks_completed / TOTAL_WEEKS * 100),
    )
