"""Ownership and visibility checks shared by the endpoints."""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.exceptions import AuthorizationError, NotFoundError
from liftlog.models.exercise import Exercise
from liftlog.models.split import Split
from liftlog.models.workout import ExerciseSet, WorkoutSession


async def get_visible_exercise(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> Exercise:
    """Catalog exercises are public; custom ones only to their owner."""
    exercise = await db.get(Exercise, exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise not found")
    if not exercise.is_visible_to(user_id):
        raise AuthorizationError("You are not allowed to access this exercise")
    return exercise


async def get_owned_split(db: AsyncSession, user_id: uuid.UUID, split_id: uuid.UUID) -> Split:
    split = await db.get(Split, split_id)
    if split is None:
        raise NotFoundError("Split not found")
    if split.user_id != user_id:
        raise AuthorizationError("You are not allowed to access this split")
    return split


async def get_owned_session(
    db: AsyncSession, user_id: uuid.UUID, workout_session_id: uuid.UUID
) -> WorkoutSession:
    session = await db.get(WorkoutSession, workout_session_id)
    if session is None:
        raise NotFoundError("Workout session not found")
    if session.user_id != user_id:
        raise AuthorizationError("You are not allowed to access this workout session")
    return session


async def get_owned_exercise_set(
    db: AsyncSession, user_id: uuid.UUID, exercise_set_id: uuid.UUID
) -> ExerciseSet:
    """Exercise sets inherit ownership from their session."""
    exercise_set = await db.get(ExerciseSet, exercise_set_id)
    if exercise_set is None:
        raise NotFoundError("Exercise set not found")
    await get_owned_session(db, user_id, exercise_set.workout_session_id)
    return exercise_set
