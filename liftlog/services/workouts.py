"""Workout session aggregate: sessions, exercise sets and logged sets."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.core.exceptions import NotFoundError
from liftlog.models.workout import ExerciseSet, LoggedSet, WorkoutSession
from liftlog.schemas.workout import ExerciseSetCreate, LoggedSetCreate
from liftlog.services.access import (
    get_owned_exercise_set,
    get_owned_session,
    get_owned_split,
    get_visible_exercise,
)
from liftlog.services.performance import (
    recalculate_exercise_performance,
    update_last_workout_data,
    update_personal_best,
)

logger = logging.getLogger(__name__)


def _session_with_sets():
    return select(WorkoutSession).options(selectinload(WorkoutSession.exercise_sets))


async def create_session(
    db: AsyncSession, user_id: uuid.UUID, split_id: uuid.UUID | None = None
) -> WorkoutSession:
    if split_id is not None:
        await get_owned_split(db, user_id, split_id)
    session = WorkoutSession(
        user_id=user_id,
        split_id=split_id,
        started_at=datetime.now(timezone.utc),
        is_active=True,
    )
    db.add(session)
    await db.flush()
    return session


async def get_or_create_active_session(db: AsyncSession, user_id: uuid.UUID) -> WorkoutSession:
    """Latest active session, so an unfinished workout is resumed instead of duplicated."""
    result = await db.execute(
        select(WorkoutSession)
        .where(WorkoutSession.user_id == user_id, WorkoutSession.is_active.is_(True))
        .order_by(WorkoutSession.started_at.desc())
        .limit(1)
    )
    session = result.scalar_one_or_none()
    if session is not None:
        return session
    return await create_session(db, user_id)


async def get_session_with_sets(
    db: AsyncSession, user_id: uuid.UUID, workout_session_id: uuid.UUID
) -> WorkoutSession:
    await get_owned_session(db, user_id, workout_session_id)
    result = await db.execute(
        _session_with_sets()
        .where(WorkoutSession.id == workout_session_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def list_sessions(
    db: AsyncSession, user_id: uuid.UUID, skip: int = 0, limit: int = 50
) -> list[WorkoutSession]:
    result = await db.execute(
        select(WorkoutSession)
        .where(WorkoutSession.user_id == user_id)
        .order_by(WorkoutSession.started_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


async def set_session_active(
    db: AsyncSession, user_id: uuid.UUID, workout_session_id: uuid.UUID, is_active: bool
) -> WorkoutSession:
    session = await get_owned_session(db, user_id, workout_session_id)
    session.is_active = is_active
    await db.flush()
    return session


async def complete_session(
    db: AsyncSession,
    user_id: uuid.UUID,
    workout_session_id: uuid.UUID,
    notes: str | None = None,
) -> WorkoutSession:
    """Mark the session done and fold its sets into each exercise's performance record."""
    session = await get_owned_session(db, user_id, workout_session_id)
    session.is_active = False
    session.completed_at = datetime.now(timezone.utc)
    if notes is not None:
        session.notes = notes
    await db.flush()

    result = await db.execute(
        select(ExerciseSet.exercise_id)
        .where(ExerciseSet.workout_session_id == workout_session_id)
        .order_by(ExerciseSet.order)
    )
    exercise_ids = list(dict.fromkeys(result.scalars().all()))
    for exercise_id in exercise_ids:
        await update_last_workout_data(db, user_id, exercise_id, workout_session_id)
        await update_personal_best(db, user_id, exercise_id, workout_session_id)
    logger.info(
        "Completed workout session %s (%d exercises)", workout_session_id, len(exercise_ids)
    )
    return session


async def delete_session(db: AsyncSession, user_id: uuid.UUID, workout_session_id: uuid.UUID) -> None:
    """Delete the session (sets cascade), then rebuild performance for the exercises it held."""
    session = await get_owned_session(db, user_id, workout_session_id)
    result = await db.execute(
        select(ExerciseSet.exercise_id).where(ExerciseSet.workout_session_id == workout_session_id)
    )
    exercise_ids = list(dict.fromkeys(result.scalars().all()))

    await db.delete(session)
    await db.flush()

    for exercise_id in exercise_ids:
        await recalculate_exercise_performance(db, user_id, exercise_id)


# ── Exercise sets ────────────────────────────────────────────────────────

async def add_exercise_set(
    db: AsyncSession, user_id: uuid.UUID, workout_session_id: uuid.UUID, payload: ExerciseSetCreate
) -> ExerciseSet:
    await get_owned_session(db, user_id, workout_session_id)
    exercise = await get_visible_exercise(db, user_id, payload.exercise_id)
    exercise_set = ExerciseSet(
        workout_session_id=workout_session_id,
        exercise_id=exercise.id,
        order=payload.order,
        is_active=False,
        created_at=datetime.now(timezone.utc),
    )
    exercise_set.exercise = exercise
    exercise_set.logged_sets = []
    db.add(exercise_set)
    await db.flush()
    return exercise_set


async def remove_exercise_set(db: AsyncSession, user_id: uuid.UUID, exercise_set_id: uuid.UUID) -> None:
    exercise_set = await get_owned_exercise_set(db, user_id, exercise_set_id)
    await db.delete(exercise_set)
    await db.flush()


async def set_exercise_set_active(
    db: AsyncSession, user_id: uuid.UUID, exercise_set_id: uuid.UUID, is_active: bool
) -> ExerciseSet:
    exercise_set = await get_owned_exercise_set(db, user_id, exercise_set_id)
    exercise_set.is_active = is_active
    await db.flush()
    return exercise_set


async def append_logged_set(
    db: AsyncSession, user_id: uuid.UUID, exercise_set_id: uuid.UUID, payload: LoggedSetCreate
) -> ExerciseSet:
    """Logged sets only ever grow at the end."""
    exercise_set = await get_owned_exercise_set(db, user_id, exercise_set_id)
    position = max((s.position for s in exercise_set.logged_sets), default=-1) + 1
    exercise_set.logged_sets.append(LoggedSet(position=position, **payload.model_dump()))
    await db.flush()
    return exercise_set


async def remove_logged_set(
    db: AsyncSession, user_id: uuid.UUID, exercise_set_id: uuid.UUID, logged_set_id: uuid.UUID
) -> ExerciseSet:
    exercise_set = await get_owned_exercise_set(db, user_id, exercise_set_id)
    logged = next((s for s in exercise_set.logged_sets if s.id == logged_set_id), None)
    if logged is None:
        raise NotFoundError("Set not found")
    exercise_set.logged_sets.remove(logged)
    await db.flush()
    return exercise_set
