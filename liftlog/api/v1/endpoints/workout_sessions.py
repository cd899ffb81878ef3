"""Workout session endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import get_current_user
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.workout import (
    ExerciseSetCreate,
    ExerciseSetRead,
    WorkoutSessionActiveUpdate,
    WorkoutSessionComplete,
    WorkoutSessionCreate,
    WorkoutSessionRead,
    WorkoutSessionReadWithSets,
)
from liftlog.services import workouts

router = APIRouter()


@router.get("", response_model=list[WorkoutSessionRead])
async def list_sessions(
    skip: int = 0,
    limit: int = 50,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's sessions, newest first (without sets)."""
    return await workouts.list_sessions(db, user.id, skip=skip, limit=limit)


@router.post("", response_model=WorkoutSessionRead, status_code=201)
async def create_session(
    payload: WorkoutSessionCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Start a new workout, optionally from one of the caller's splits."""
    return await workouts.create_session(db, user.id, payload.split_id)


@router.post("/active", response_model=WorkoutSessionRead)
async def get_or_create_active_session(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Resume the latest unfinished workout, or start one."""
    return await workouts.get_or_create_active_session(db, user.id)


@router.get("/{workout_session_id}", response_model=WorkoutSessionReadWithSets)
async def get_session(
    workout_session_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Session with its exercise sets (ordered) and their logged sets."""
    return await workouts.get_session_with_sets(db, user.id, workout_session_id)


@router.patch("/{workout_session_id}/active", response_model=WorkoutSessionRead)
async def set_session_active(
    workout_session_id: uuid.UUID,
    payload: WorkoutSessionActiveUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await workouts.set_session_active(db, user.id, workout_session_id, payload.is_active)


@router.post("/{workout_session_id}/complete", response_model=WorkoutSessionRead)
async def complete_session(
    workout_session_id: uuid.UUID,
    payload: WorkoutSessionComplete,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Finish the workout with optional notes; updates last-performed data and personal bests."""
    return await workouts.complete_session(db, user.id, workout_session_id, payload.notes)


@router.delete("/{workout_session_id}", status_code=204)
async def delete_session(
    workout_session_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its sets."""
    await workouts.delete_session(db, user.id, workout_session_id)
    return None


@router.post("/{workout_session_id}/exercise-sets", response_model=ExerciseSetRead, status_code=201)
async def add_exercise_set(
    workout_session_id: uuid.UUID,
    payload: ExerciseSetCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add an exercise to the workout (no sets logged yet)."""
    return await workouts.add_exercise_set(db, user.id, workout_session_id, payload)
