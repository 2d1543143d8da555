"""Tests for the data access layer."""

from datetime import timedelta

from conftest import make_log, make_workout

from ring_tracker.db.repositories import (
    BodyMetricsRepository,
    ExerciseProgressRepository,
    UserRepository,
    UserVariantsRepository,
    WorkoutRepository,
)
from ring_tracker.models.metrics import BodyMeasurements, BodyMetrics
from ring_tracker.models.program import SessionType
from ring_tracker.models.progress import CurrentProgression, ExerciseProgress, UserVariants
from ring_tracker.models.user import User, WeightUnit, default_settings


class TestUserRepository:
    """Tests for UserRepository."""

    async def test_create_and_get(self, db_path):
        repo = UserRepository(db_path)
        user_id = await repo.create(User(email="new@example.com", name="New"))

        user = await repo.get(user_id)
        assert user.email == "new@example.com"
        assert user.settings.current_phase == 1
        assert user.created_at is not None

        assert (await repo.get_by_email("new@example.com")).id == user_id
        assert await repo.get_by_email("missing@example.com") is None

    async def test_update_settings(self, db_path, user):
        repo = UserRepository(db_path)
        updated = await repo.update_settings(
            user.id, user.settings.merge({"currentWeek": 4, "weightUnit": "lbs"})
        )
        assert updated.settings.current_week == 4
        assert updated.settings.weight_unit == WeightUnit.LBS

    async def test_update_settings_missing_user(self, db_path):
        repo = UserRepository(db_path)
        assert await repo.update_settings(999, default_settings()) is None

    async def test_update_profile_keeps_existing_image(self, db_path):
        repo = UserRepository(db_path)
        user_id = await repo.create(User(email="p@example.com", name="P", image="a.png"))
        await repo.update_profile(user_id, "Renamed", None)

        user = await repo.get(user_id)
        assert user.name == "Renamed"
        assert user.image == "a.png"

    async def test_delete(self, db_path, user):
        repo = UserRepository(db_path)
        assert await repo.delete(user.id)
        assert await repo.get(user.id) is None
        assert not await repo.delete(user.id)


class TestWorkoutRepository:
    """Tests for WorkoutRepository."""

    async def test_create_and_get(self, db_path, user, utc):
        repo = WorkoutRepository(db_path)
        log = make_log("Chest Fly", [8, 7], variant="Low rings")
        created = await repo.create(make_workout(user.id, utc(2024, 6, 10, 8), exercises=[log]))

        workout = await repo.get(created.id, user.id)
        assert workout.session == SessionType.PUSH_1
        assert workout.date == utc(2024, 6, 10, 8)
        assert workout.exercises[0].progression.variant == "Low rings"
        assert [s.reps for s in workout.exercises[0].sets] == [8, 7]
        assert workout.is_seed is False

    async def test_get_is_scoped_to_owner(self, db_path, user, other_user, utc):
        repo = WorkoutRepository(db_path)
        created = await repo.create(make_workout(user.id, utc(2024, 6, 10)))
        assert await repo.get(created.id, other_user.id) is None

    async def test_list_newest_first_with_limit(self, db_path, user, utc):
        repo = WorkoutRepository(db_path)
        start = utc(2024, 6, 10)
        await repo.create_many([make_workout(user.id, start + timedelta(days=i)) for i in range(5)])

        workouts = await repo.list_for_user(user.id, limit=3)
        assert [w.date for w in workouts] == [start + timedelta(days=d) for d in (4, 3, 2)]

        # Non-positive limits mean no limit
        assert len(await repo.list_for_user(user.id, limit=-1)) == 5

    async def test_list_filters(self, db_path, user, other_user, utc):
        repo = WorkoutRepository(db_path)
        await repo.create_many(
            [
                make_workout(user.id, utc(2024, 6, 10), phase=1, week=1),
                make_workout(user.id, utc(2024, 6, 12), session=SessionType.PULL_1, phase=1, week=1),
                make_workout(user.id, utc(2024, 6, 17), phase=1, week=2),
                make_workout(user.id, utc(2024, 8, 5), phase=2, week=1),
                make_workout(other_user.id, utc(2024, 6, 11)),
            ]
        )

        assert len(await repo.list_for_user(user.id, limit=50)) == 4
        assert len(await repo.list_for_user(user.id, phase=1, week=1)) == 2
        assert len(await repo.list_for_user(user.id, phase=2)) == 1
        assert len(await repo.list_for_user(user.id, session="Pull 1")) == 1

        in_range = await repo.list_for_user(
            user.id, start=utc(2024, 6, 10), end=utc(2024, 6, 16, 23, 59)
        )
        assert len(in_range) == 2

    async def test_update_supplied_fields_only(self, db_path, user, utc):
        repo = WorkoutRepository(db_path)
        created = await repo.create(make_workout(user.id, utc(2024, 6, 10), duration=30))

        updated = await repo.update(created.id, user.id, notes="Good session")
        assert updated.notes == "Good session"
        assert updated.duration == 30

        updated = await repo.update(created.id, user.id, duration=None)
        assert updated.duration is None
        assert updated.notes == "Good session"

    async def test_update_other_users_workout(self, db_path, user, other_user, utc):
        repo = WorkoutRepository(db_path)
        created = await repo.create(make_workout(user.id, utc(2024, 6, 10)))

        assert await repo.update(created.id, other_user.id, notes="hijack") is None
        assert (await repo.get(created.id, user.id)).notes is None

    async def test_delete(self, db_path, user, other_user, utc):
        repo = WorkoutRepository(db_path)
        created = await repo.create(make_workout(user.id, utc(2024, 6, 10)))

        assert not await repo.delete(created.id, other_user.id)
        assert await repo.delete(created.id, user.id)
        assert await repo.get(created.id, user.id) is None

    async def test_delete_seed_only(self, db_path, user, utc):
        repo = WorkoutRepository(db_path)
        seeded = make_workout(user.id, utc(2024, 6, 10))
        seeded.is_seed = True
        await repo.create_many([seeded, make_workout(user.id, utc(2024, 6, 12))])

        assert await repo.delete_for_user(user.id, seed_only=True) == 1
        remaining = await repo.list_for_user(user.id)
        assert len(remaining) == 1
        assert remaining[0].is_seed is False


class TestBodyMetricsRepository:
    """Tests for BodyMetricsRepository."""

    async def test_create_and_list(self, db_path, user, utc):
        repo = BodyMetricsRepository(db_path)
        await repo.create(BodyMetrics(user_id=user.id, date=utc(2024, 6, 10), weight=70.5))
        await repo.create(
            BodyMetrics(
                user_id=user.id,
                date=utc(2024, 6, 14),
                weight=70.1,
                measurements=BodyMeasurements(waist=80.0),
                notes="Morning",
            )
        )

        metrics = await repo.list_for_user(user.id)
        assert [m.weight for m in metrics] == [70.1, 70.5]
        assert metrics[0].measurements.waist == 80.0
        assert metrics[1].measurements is None

    async def test_delete_is_scoped_to_owner(self, db_path, user, other_user, utc):
        repo = BodyMetricsRepository(db_path)
        metric = await repo.create(BodyMetrics(user_id=user.id, date=utc(2024, 6, 10), weight=70))

        assert not await repo.delete(metric.id, other_user.id)
        assert await repo.delete(metric.id, user.id)
        assert await repo.list_for_user(user.id) == []


class TestProgressRepositories:
    """Tests for exercise progress and variant usage storage."""

    async def test_progress_upsert(self, db_path, user, utc):
        repo = ExerciseProgressRepository(db_path)
        current = CurrentProgression(
            variant="Standard", last_used=utc(2024, 6, 10), avg_reps=8.0, avg_sets=3.0
        )
        progress = ExerciseProgress(user_id=user.id, exercise_name="Chest Fly", current_progression=current)
        progress.used_variants.append("Standard")
        await repo.upsert(progress)

        progress.used_variants.append("Low rings")
        await repo.upsert(progress)

        stored = await repo.get(user.id, "Chest Fly")
        assert stored.used_variants == ["Standard", "Low rings"]
        assert stored.current_progression.avg_reps == 8.0
        assert await repo.get(user.id, "Tricep Dip") is None
        assert await repo.delete_for_user(user.id) == 1

    async def test_variants_upsert(self, db_path, user, utc):
        repo = UserVariantsRepository(db_path)
        variants = UserVariants(user_id=user.id, exercise_name="Chest Fly")
        variants.record("Low rings", utc(2024, 6, 10))
        await repo.upsert(variants)

        stored = await repo.get(user.id, "Chest Fly")
        stored.record("Low rings", utc(2024, 6, 12))
        await repo.upsert(stored)

        stored = await repo.get(user.id, "Chest Fly")
        assert stored.variants[0].times_used == 2
        assert stored.variants[0].last_used == utc(2024, 6, 12)
        assert await repo.delete_for_user(user.id) == 1
