"""Splits - named, ordered exercise lists (training programs)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import get_current_user
from liftlog.db.session import get_db
from liftlog.models.exercise import Exercise
from liftlog.models.split import Split
from liftlog.models.user import User
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.split import SplitAddExercises, SplitCreate, SplitRead
from liftlog.services import splits as split_service

router = APIRouter()


def _to_read(split: Split, exercises: list[Exercise]) -> SplitRead:
    return SplitRead(
        id=split.id,
        user_id=split.user_id,
        name=split.name,
        description=split.description,
        created_at=split.created_at,
        updated_at=split.updated_at,
        exercises=[ExerciseRead.model_validate(e) for e in exercises],
    )


@router.get("", response_model=list[SplitRead])
async def list_splits(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's splits, most recently updated first."""
    splits = await split_service.list_splits(db, user.id)
    exercises = await split_service.resolve_exercises_for(db, splits)
    return [_to_read(s, exercises[s.id]) for s in splits]


@router.post("", response_model=SplitRead, status_code=201)
async def create_split(
    payload: SplitCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a split (name 3-50 chars, description up to 500)."""
    split = await split_service.create_split(db, user.id, payload)
    return _to_read(split, await split_service.resolve_exercises(db, split))


@router.get("/{split_id}", response_model=SplitRead)
async def get_split(
    split_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    split = await split_service.get_split(db, user.id, split_id)
    return _to_read(split, await split_service.resolve_exercises(db, split))


@router.post("/{split_id}/exercises", response_model=SplitRead)
async def add_exercises(
    split_id: uuid.UUID,
    payload: SplitAddExercises,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add exercises; ones already in the split are skipped."""
    split = await split_service.add_exercises_to_split(db, user.id, split_id, payload.exercise_ids)
    return _to_read(split, await split_service.resolve_exercises(db, split))
