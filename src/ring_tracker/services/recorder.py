"""Recording a workout against the program catalog."""

import logging
import re
from datetime import datetime

from ..data.program_data import get_exercise_definition, get_session_for_phase
from ..db.repositories import WorkoutRepository
from ..models.program import ProgramExercise, ProgramSession, SessionType
from ..models.user import UserSettings
from ..models.workout import ExerciseLog, ExerciseProgression, SetLog, Workout
from ..utils.date_utils import utcnow
from ..utils.formatting import slugify

logger = logging.getLogger(__name__)

DEFAULT_SET_COUNT = 3

_SESSION_SLUGS = {slugify(s.value): s for s in SessionType}
_FIRST_INT = re.compile(r"(\d+)")


def session_from_slug(slug: str) -> SessionType:
    """Map a URL slug ("push-1") to a session type, defaulting to Push 1."""
    return _SESSION_SLUGS.get(slug, SessionType.PUSH_1)


def session_to_slug(session: SessionType | str) -> str:
    return slugify(SessionType(session).value)


def parse_target_sets(target_sets: str) -> int:
    """Initial number of set rows: the first integer in the target, else 3."""
    match = _FIRST_INT.search(target_sets or "")
    if match:
        return int(match.group(1))
    return DEFAULT_SET_COUNT


def create_initial_exercise_logs(exercises: list[ProgramExercise] | tuple) -> list[ExerciseLog]:
    """Blank logs for a session: one block of empty sets per exercise."""
    logs = []
    for exercise in exercises:
        count = parse_target_sets(exercise.target_sets)
        logs.append(
            ExerciseLog(
                letter=exercise.letter,
                exercise_name=exercise.name,
                progression=ExerciseProgression(variant=""),
                sets=[SetLog(set_number=i + 1, reps=0, completed=False) for i in range(count)],
            )
        )
    return logs


async def previous_exercise_logs(
    repo: WorkoutRepository, user_id: int, session: SessionType | str
) -> dict[str, ExerciseLog]:
    """Logs from the user's most recent workout of the same session, by exercise name."""
    recent = await repo.list_for_user(user_id, limit=1, session=SessionType(session).value)
    if not recent:
        return {}
    return {log.exercise_name: log for log in recent[0].exercises}


def variant_suggestions(session: ProgramSession | None) -> dict[str, list[str]]:
    """Example progressions for each exercise of a session."""
    if session is None:
        return {}
    suggestions = {}
    for exercise in session.exercises:
        definition = get_exercise_definition(exercise.name)
        suggestions[exercise.name] = list(definition.example_progressions) if definition else []
    return suggestions


class WorkoutRecorder:
    """Holds an in-progress workout and persists it on demand.

    Nothing is written until ``start`` has been called. The first ``save``
    creates the workout, later saves update it by id.
    """

    def __init__(
        self,
        repo: WorkoutRepository,
        user_id: int,
        session_type: SessionType | str,
        settings: UserSettings,
    ):
        self.repo = repo
        self.user_id = user_id
        self.session_type = SessionType(session_type)
        self.phase = settings.current_phase or 1
        self.week = settings.current_week or 1
        self.is_deload = settings.is_deload

        self.session = get_session_for_phase(self.phase, self.session_type, self.is_deload)
        if self.session is None:
            logger.warning(
                "No program session for phase %s %s", self.phase, self.session_type.value
            )
            self.exercises: list[ExerciseLog] = []
        else:
            self.exercises = create_initial_exercise_logs(self.session.exercises)

        self.notes = ""
        self.workout_id: int | None = None
        self.started_at: datetime | None = None

    @property
    def started(self) -> bool:
        return self.started_at is not None

    def start(self, now: datetime | None = None) -> None:
        self.started_at = now or utcnow()

    def elapsed_minutes(self, now: datetime | None = None) -> int:
        if self.started_at is None:
            return 0
        now = now or utcnow()
        return round((now - self.started_at).total_seconds() / 60)

    async def save(self, now: datetime | None = None) -> Workout | None:
        """Persist the current logs. Returns None if the workout was not started."""
        if not self.started:
            return None

        now = now or utcnow()
        duration = self.elapsed_minutes(now)

        if self.workout_id is not None:
            return await self.repo.update(
                self.workout_id,
                self.user_id,
                exercises=self.exercises,
                notes=self.notes,
                duration=duration,
            )

        workout = await self.repo.create(
            Workout(
                user_id=self.user_id,
                date=now,
                phase=self.phase,
                week=self.week,
                session=self.session_type,
                is_deload=self.is_deload,
                exercises=self.exercises,
                notes=self.notes,
                duration=duration,
            )
        )
        self.workout_id = workout.id
        return workout

    async def complete(self, now: datetime | None = None) -> Workout | None:
        """Final save. Incomplete sets are kept as they are."""
        return await self.save(now)
