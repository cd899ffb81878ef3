"""Exercise-set endpoints: active flag and the logged sets inside."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import get_current_user
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.workout import ExerciseSetActiveUpdate, ExerciseSetRead, LoggedSetCreate
from liftlog.services import workouts

router = APIRouter()


@router.delete("/{exercise_set_id}", status_code=204)
async def remove_exercise_set(
    exercise_set_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Remove an exercise (and its logged sets) from a workout."""
    await workouts.remove_exercise_set(db, user.id, exercise_set_id)
    return None


@router.patch("/{exercise_set_id}/active", response_model=ExerciseSetRead)
async def set_exercise_set_active(
    exercise_set_id: uuid.UUID,
    payload: ExerciseSetActiveUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await workouts.set_exercise_set_active(db, user.id, exercise_set_id, payload.is_active)


@router.post("/{exercise_set_id}/sets", response_model=ExerciseSetRead, status_code=201)
async def append_logged_set(
    exercise_set_id: uuid.UUID,
    payload: LoggedSetCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Log a set (appended after the existing ones)."""
    return await workouts.append_logged_set(db, user.id, exercise_set_id, payload)


@router.delete("/{exercise_set_id}/sets/{logged_set_id}", response_model=ExerciseSetRead)
async def remove_logged_set(
    exercise_set_id: uuid.UUID,
    logged_set_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await workouts.remove_logged_set(db, user.id, exercise_set_id, logged_set_id)
