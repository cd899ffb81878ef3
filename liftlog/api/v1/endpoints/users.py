"""Current user profile, preferences and body-weight history."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import get_current_user
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.user import (
    BodyWeightCreate,
    BodyWeightRead,
    UserPreferencesUpdate,
    UserRead,
    UserUpdate,
)
from liftlog.services import identity

router = APIRouter()


@router.get("/me", response_model=UserRead)
async def get_me(user: User = Depends(get_current_user)):
    """The signed-in user."""
    return user


@router.patch("/me", response_model=UserRead)
async def update_me(
    payload: UserUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Partial update: body weight fields, preferences merged into the stored ones."""
    return await identity.update_user(db, user, payload)


@router.patch("/me/preferences", response_model=UserRead)
async def update_my_preferences(
    payload: UserPreferencesUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await identity.update_preferences(db, user, payload.preferences)


@router.get("/me/body-weight", response_model=list[BodyWeightRead])
async def list_body_weight(
    limit: int = 100,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Body-weight history, newest first."""
    return await identity.list_body_weight(db, user, limit=limit)


@router.post("/me/body-weight", response_model=BodyWeightRead, status_code=201)
async def record_body_weight(
    payload: BodyWeightCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Record a reading; it becomes the current body weight."""
    return await identity.record_body_weight(db, user, payload)
