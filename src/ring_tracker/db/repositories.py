"""Data access layer for ring-tracker.

Every method that touches a user-owned table takes the owner's id and
filters on it, so another user's document behaves as if it did not exist.
"""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.metrics import BodyMeasurements, BodyMetrics
from ..models.program import SessionType
from ..models.progress import ExerciseProgress, UserVariants, VariantUsage
from ..models.user import User, UserSettings
from ..models.workout import ExerciseLog, Workout
from ..utils.date_utils import parse_datetime, to_iso, utcnow
from .engine import get_db_path

# Marks an update argument that was not supplied (None is a valid value)
UNSET = object()


class UserRepository:
    """Repository for users."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user: User) -> int:
        """Create a new user."""
        now = utcnow()
        user.created_at = user.created_at or now
        user.updated_at = user.updated_at or now
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO users
                (email, name, image, provider_account_id, settings, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user.email,
                    user.name,
                    user.image,
                    user.provider_account_id,
                    json.dumps(user.settings.to_dict()),
                    to_iso(user.created_at),
                    to_iso(user.updated_at),
                ),
            )
            await db.commit()
            user.id = cursor.lastrowid
            return cursor.lastrowid

    async def get(self, user_id: int) -> User | None:
        """Get a user by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def update_profile(self, user_id: int, name: str | None, image: str | None) -> None:
        """Refresh name/image from the identity provider."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE users SET
                    name = COALESCE(?, name), image = COALESCE(?, image), updated_at = ?
                WHERE id = ?
                """,
                (name, image, to_iso(utcnow()), user_id),
            )
            await db.commit()

    async def update_settings(self, user_id: int, settings: UserSettings) -> User | None:
        """Replace a user's settings and return the updated user."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE users SET settings = ?, updated_at = ? WHERE id = ?",
                (json.dumps(settings.to_dict()), to_iso(utcnow()), user_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                return None
        return await self.get(user_id)

    async def delete(self, user_id: int) -> bool:
        """Delete a user document. Owned documents are not touched."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM users WHERE id = ?", (user_id,))
            await db.commit()
            return cursor.rowcount > 0

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            id=row["id"],
            email=row["email"],
            name=row["name"],
            image=row["image"],
            provider_account_id=row["provider_account_id"],
            settings=UserSettings.from_dict(json.loads(row["settings"])),
            created_at=parse_datetime(row["created_at"]),
            updated_at=parse_datetime(row["updated_at"]),
        )


class WorkoutRepository:
    """Repository for workouts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout) -> Workout:
        """Insert a workout and return it with its new ID."""
        now = utcnow()
        workout.created_at = workout.created_at or now
        workout.updated_at = workout.updated_at or now
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workouts
                (user_id, date, phase, week, session, is_deload, exercises,
                 notes, duration, is_seed, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                self._workout_params(workout),
            )
            await db.commit()
            workout.id = cursor.lastrowid
        return workout

    async def create_many(self, workouts: list[Workout]) -> int:
        """Bulk insert workouts."""
        now = utcnow()
        for workout in workouts:
            workout.created_at = workout.created_at or now
            workout.updated_at = workout.updated_at or now
        async with aiosqlite.connect(self.db_path) as db:
            await db.executemany(
                """
                INSERT INTO workouts
                (user_id, date, phase, week, session, is_deload, exercises,
                 notes, duration, is_seed, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [self._workout_params(w) for w in workouts],
            )
            await db.commit()
        return len(workouts)

    async def get(self, workout_id: int, user_id: int) -> Workout | None:
        """Get a workout owned by ``user_id``."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ? AND user_id = ?",
                (workout_id, user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_for_user(
        self,
        user_id: int,
        limit: int = 10,
        start: datetime | None = None,
        end: datetime | None = None,
        phase: int | None = None,
        week: int | None = None,
        session: str | None = None,
    ) -> list[Workout]:
        """List a user's workouts, newest first."""
        clauses = ["user_id = ?"]
        params: list = [user_id]

        if start is not None:
            clauses.append("date >= ?")
            params.append(to_iso(start))
        if end is not None:
            clauses.append("date <= ?")
            params.append(to_iso(end))
        if phase is not None:
            clauses.append("phase = ?")
            params.append(phase)
        if week is not None:
            clauses.append("week = ?")
            params.append(week)
        if session is not None:
            clauses.append("session = ?")
            params.append(session)

        params.append(limit)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"""
                SELECT * FROM workouts
                WHERE {" AND ".join(clauses)}
                ORDER BY date DESC, id DESC
                LIMIT ?
                """,
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def update(
        self,
        workout_id: int,
        user_id: int,
        exercises=UNSET,
        notes=UNSET,
        duration=UNSET,
    ) -> Workout | None:
        """Update the mutable fields that were supplied.

        Returns the updated workout, or None if no workout with that ID is
        owned by ``user_id``.
        """
        assignments = ["updated_at = ?"]
        params: list = [to_iso(utcnow())]

        if exercises is not UNSET:
            assignments.append("exercises = ?")
            params.append(json.dumps([e.to_dict() for e in exercises]))
        if notes is not UNSET:
            assignments.append("notes = ?")
            params.append(notes)
        if duration is not UNSET:
            assignments.append("duration = ?")
            params.append(duration)

        params.extend([workout_id, user_id])
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                f"UPDATE workouts SET {', '.join(assignments)} WHERE id = ? AND user_id = ?",
                params,
            )
            await db.commit()
            if cursor.rowcount == 0:
                return None
        return await self.get(workout_id, user_id)

    async def delete(self, workout_id: int, user_id: int) -> bool:
        """Delete a workout owned by ``user_id``."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM workouts WHERE id = ? AND user_id = ?",
                (workout_id, user_id),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def delete_for_user(self, user_id: int, seed_only: bool = False) -> int:
        """Delete all (or only seeded) workouts of a user."""
        query = "DELETE FROM workouts WHERE user_id = ?"
        if seed_only:
            query += " AND is_seed = 1"
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(query, (user_id,))
            await db.commit()
            return cursor.rowcount

    def _workout_params(self, workout: Workout) -> tuple:
        return (
            workout.user_id,
            to_iso(workout.date),
            workout.phase,
            workout.week,
            SessionType(workout.session).value,
            int(workout.is_deload),
            json.dumps([e.to_dict() for e in workout.exercises]),
            workout.notes,
            workout.duration,
            int(workout.is_seed),
            to_iso(workout.created_at),
            to_iso(workout.updated_at),
        )

    def _row_to_workout(self, row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        return Workout(
            id=row["id"],
            user_id=row["user_id"],
            date=parse_datetime(row["date"]),
            phase=row["phase"],
            week=row["week"],
            session=SessionType(row["session"]),
            is_deload=bool(row["is_deload"]),
            exercises=[ExerciseLog.from_dict(e) for e in json.loads(row["exercises"])],
            notes=row["notes"],
            duration=row["duration"],
            is_seed=bool(row["is_seed"]),
            created_at=parse_datetime(row["created_at"]),
            updated_at=parse_datetime(row["updated_at"]),
        )


class BodyMetricsRepository:
    """Repository for body metrics."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, metric: BodyMetrics) -> BodyMetrics:
        """Insert a body metrics entry and return it with its new ID."""
        metric.created_at = metric.created_at or utcnow()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO body_metrics
                (user_id, date, weight, measurements, notes, is_seed, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                self._metric_params(metric),
            )
            await db.commit()
            metric.id = cursor.lastrowid
        return metric

    async def create_many(self, metrics: list[BodyMetrics]) -> int:
        """Bulk insert body metrics."""
        now = utcnow()
        for metric in metrics:
            metric.created_at = metric.created_at or now
        async with aiosqlite.connect(self.db_path) as db:
            await db.executemany(
                """
                INSERT INTO body_metrics
                (user_id, date, weight, measurements, notes, is_seed, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [self._metric_params(m) for m in metrics],
            )
            await db.commit()
        return len(metrics)

    async def list_for_user(self, user_id: int, limit: int = 100) -> list[BodyMetrics]:
        """List a user's entries, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM body_metrics WHERE user_id = ?
                ORDER BY date DESC, id DESC LIMIT ?
                """,
                (user_id, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_metric(row) for row in rows]

    async def delete(self, metric_id: int, user_id: int) -> bool:
        """Delete an entry owned by ``user_id``."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM body_metrics WHERE id = ? AND user_id = ?",
                (metric_id, user_id),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def delete_for_user(self, user_id: int, seed_only: bool = False) -> int:
        """Delete all (or only seeded) entries of a user."""
        query = "DELETE FROM body_metrics WHERE user_id = ?"
        if seed_only:
            query += " AND is_seed = 1"
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(query, (user_id,))
            await db.commit()
            return cursor.rowcount

    def _metric_params(self, metric: BodyMetrics) -> tuple:
        measurements = None
        if metric.measurements is not None:
            measurements = json.dumps(metric.measurements.to_dict())
        return (
            metric.user_id,
            to_iso(metric.date),
            metric.weight,
            measurements,
            metric.notes,
            int(metric.is_seed),
            to_iso(metric.created_at),
        )

    def _row_to_metric(self, row: aiosqlite.Row) -> BodyMetrics:
        """Convert a database row to BodyMetrics."""
        measurements = None
        if row["measurements"]:
            measurements = BodyMeasurements.from_dict(json.loads(row["measurements"]))
        return BodyMetrics(
            id=row["id"],
            user_id=row["user_id"],
            date=parse_datetime(row["date"]),
            weight=row["weight"],
            measurements=measurements,
            notes=row["notes"],
            is_seed=bool(row["is_seed"]),
            created_at=parse_datetime(row["created_at"]),
        )


class ExerciseProgressRepository:
    """Repository for per-exercise progress documents."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, user_id: int, exercise_name: str) -> ExerciseProgress | None:
        """Get progress for one exercise of a user."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercise_progress WHERE user_id = ? AND exercise_name = ?",
                (user_id, exercise_name),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return ExerciseProgress.from_dict(
                json.loads(row["data"]),
                user_id=row["user_id"],
                exercise_name=row["exercise_name"],
                id=row["id"],
                updated_at=parse_datetime(row["updated_at"]),
            )

    async def upsert(self, progress: ExerciseProgress) -> None:
        """Create or replace the progress document for an exercise."""
        progress.updated_at = utcnow()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO exercise_progress (user_id, exercise_name, data, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(user_id, exercise_name)
                DO UPDATE SET data = excluded.data, updated_at = excluded.updated_at
                """,
                (
                    progress.user_id,
                    progress.exercise_name,
                    json.dumps(progress.to_dict()),
                    to_iso(progress.updated_at),
                ),
            )
            await db.commit()

    async def delete_for_user(self, user_id: int) -> int:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM exercise_progress WHERE user_id = ?", (user_id,)
            )
            await db.commit()
            return cursor.rowcount


class UserVariantsRepository:
    """Repository for per-exercise variant usage (autocomplete data)."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, user_id: int, exercise_name: str) -> UserVariants | None:
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_variants WHERE user_id = ? AND exercise_name = ?",
                (user_id, exercise_name),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return UserVariants(
                id=row["id"],
                user_id=row["user_id"],
                exercise_name=row["exercise_name"],
                variants=[VariantUsage.from_dict(v) for v in json.loads(row["variants"])],
            )

    async def upsert(self, variants: UserVariants) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO user_variants (user_id, exercise_name, variants)
                VALUES (?, ?, ?)
                ON CONFLICT(user_id, exercise_name)
                DO UPDATE SET variants = excluded.variants
                """,
                (
                    variants.user_id,
                    variants.exercise_name,
                    json.dumps([v.to_dict() for v in variants.variants]),
                ),
            )
            await db.commit()

    async def delete_for_user(self, user_id: int) -> int:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM user_variants WHERE user_id = ?", (user_id,)
            )
            await db.commit()
            return cursor.rowcount
