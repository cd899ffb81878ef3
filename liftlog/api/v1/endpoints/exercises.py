"""Exercise catalog endpoints (catalog + the caller's custom exercises)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import get_current_user
from liftlog.core.exceptions import ValidationFailedError
from liftlog.core.muscle_groups import ALL_MUSCLE_GROUPS
from liftlog.db.session import get_db
from liftlog.models.exercise import Exercise
from liftlog.models.user import User
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead
from liftlog.schemas.performance import ExercisePerformanceRead
from liftlog.services.access import get_visible_exercise
from liftlog.services.performance import get_performance

router = APIRouter()


def _visible_exercises(user_id: uuid.UUID):
    return select(Exercise).where(
        Exercise.is_active.is_(True),
        or_(Exercise.is_custom.is_(False), Exercise.user_id == user_id),
    )


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    muscle_group: str | None = None,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Catalog plus own custom exercises, sorted by name. Optional muscle_group tag filter."""
    if muscle_group is not None and muscle_group not in ALL_MUSCLE_GROUPS:
        raise ValidationFailedError(f"Unknown muscle group: {muscle_group}")
    result = await db.execute(_visible_exercises(user.id).order_by(Exercise.name))
    exercises = list(result.scalars().all())
    # Tag lists are JSON; filter in Python so it works the same on every backend
    if muscle_group is not None:
        exercises = [e for e in exercises if muscle_group in (e.muscle_groups or [])]
    return exercises


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_custom_exercise(
    payload: ExerciseCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a custom exercise only visible to the caller."""
    exercise = Exercise(**payload.model_dump(), user_id=user.id, is_custom=True, is_active=True)
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a single exercise (403 for someone else's custom exercise)."""
    return await get_visible_exercise(db, user.id, exercise_id)


@router.get("/{exercise_id}/performance", response_model=ExercisePerformanceRead | None)
async def get_exercise_performance(
    exercise_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Last-performed snapshot and personal best for the caller, or null if never performed."""
    await get_visible_exercise(db, user.id, exercise_id)
    return await get_performance(db, user.id, exercise_id)
