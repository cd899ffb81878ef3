"""Builders for workout data used across tests."""

from datetime import datetime, timedelta, timezone

from liftlog.core.enums import WeightUnit
from liftlog.models.workout import ExerciseSet, LoggedSet, WorkoutSession

BASE_TIME = datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC for comparisons."""
    return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt.astimezone(timezone.utc)


async def add_session(db, user, exercise, sets, *, day=0, completed=True, unit=WeightUnit.LBS):
    """Persist a session holding one exercise set with `sets` given as (weight, reps) pairs."""
    started_at = BASE_TIME + timedelta(days=day)
    session = WorkoutSession(
        user_id=user.id,
        started_at=started_at,
        completed_at=started_at + timedelta(hours=1) if completed else None,
        is_active=not completed,
    )
    exercise_set = ExerciseSet(exercise_id=exercise.id, order=0, created_at=started_at)
    exercise_set.logged_sets = [
        LoggedSet(position=i, weight=weight, reps=reps, weight_unit=unit)
        for i, (weight, reps) in enumerate(sets)
    ]
    session.exercise_sets = [exercise_set]
    db.add(session)
    await db.flush()
    return session
