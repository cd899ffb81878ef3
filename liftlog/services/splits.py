"""Split registry: create, list, fetch and extend a user's splits."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.models.exercise import Exercise
from liftlog.models.split import Split, SplitExercise
from liftlog.schemas.split import SplitCreate
from liftlog.services.access import get_owned_split, get_visible_exercise


def merge_exercise_ids(existing: Iterable[uuid.UUID], new: Iterable[uuid.UUID]) -> list[uuid.UUID]:
    """Existing order first, then unseen new ids; duplicates dropped."""
    return list(dict.fromkeys([*existing, *new]))


async def resolve_exercises_for(db: AsyncSession, splits: Sequence[Split]) -> dict[uuid.UUID, list[Exercise]]:
    """Exercises of each split in split order, loaded with one query; missing references are skipped."""
    ids = {i for split in splits for i in split.exercise_ids}
    by_id: dict[uuid.UUID, Exercise] = {}
    if ids:
        result = await db.execute(select(Exercise).where(Exercise.id.in_(ids)))
        by_id = {e.id: e for e in result.scalars().all()}
    return {split.id: [by_id[i] for i in split.exercise_ids if i in by_id] for split in splits}


async def resolve_exercises(db: AsyncSession, split: Split) -> list[Exercise]:
    return (await resolve_exercises_for(db, [split]))[split.id]


async def create_split(db: AsyncSession, user_id: uuid.UUID, payload: SplitCreate) -> Split:
    """Name/description bounds are enforced by SplitCreate."""
    for exercise_id in payload.exercise_ids:
        await get_visible_exercise(db, user_id, exercise_id)
    now = datetime.now(timezone.utc)
    split = Split(
        user_id=user_id,
        name=payload.name,
        description=payload.description,
        created_at=now,
        updated_at=now,
        entries=[
            SplitExercise(exercise_id=exercise_id, order_in_split=i)
            for i, exercise_id in enumerate(merge_exercise_ids([], payload.exercise_ids))
        ],
    )
    db.add(split)
    await db.flush()
    return split


async def list_splits(db: AsyncSession, user_id: uuid.UUID) -> list[Split]:
    """Most recently updated first."""
    result = await db.execute(
        select(Split).where(Split.user_id == user_id).order_by(Split.updated_at.desc())
    )
    return list(result.scalars().all())


async def get_split(db: AsyncSession, user_id: uuid.UUID, split_id: uuid.UUID) -> Split:
    return await get_owned_split(db, user_id, split_id)


async def add_exercises_to_split(
    db: AsyncSession,
    user_id: uuid.UUID,
    split_id: uuid.UUID,
    exercise_ids: list[uuid.UUID],
) -> Split:
    """Append references with set semantics and bump updated_at."""
    split = await get_owned_split(db, user_id, split_id)
    for exercise_id in exercise_ids:
        await get_visible_exercise(db, user_id, exercise_id)
    existing = split.exercise_ids
    merged = merge_exercise_ids(existing, exercise_ids)
    for i, exercise_id in enumerate(merged[len(existing):], start=len(existing)):
        split.entries.append(SplitExercise(exercise_id=exercise_id, order_in_split=i))
    split.updated_at = datetime.now(timezone.utc)
    await db.flush()
    return split
