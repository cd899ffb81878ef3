"""Identity resolver: keep the users table in sync with the identity provider (Clerk)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.constants import DEFAULT_REST_TIME_SECONDS
from liftlog.core.enums import BodyWeightSource, WeightTrackingFrequency, WeightUnit
from liftlog.models.user import BodyWeightEntry, User
from liftlog.schemas.user import BodyWeightCreate, UserPreferences, UserUpdate

logger = logging.getLogger(__name__)


async def user_by_external_id(db: AsyncSession, external_id: str) -> User | None:
    result = await db.execute(select(User).where(User.external_id == external_id))
    return result.scalar_one_or_none()


def display_name(data: dict[str, Any]) -> str:
    """'First Last' from a Clerk user payload, skipping missing parts."""
    parts = [data.get("first_name"), data.get("last_name")]
    return " ".join(p.strip() for p in parts if p and p.strip())


async def upsert_from_identity(db: AsyncSession, data: dict[str, Any]) -> User:
    """Create or update a user from a user.created / user.updated event payload."""
    external_id = data["id"]
    user = await user_by_external_id(db, external_id)
    name = display_name(data)
    if user is None:
        user = User(
            external_id=external_id,
            name=name,
            default_weight_unit=WeightUnit.LBS,
            default_rest_time=DEFAULT_REST_TIME_SECONDS,
            weight_tracking_frequency=WeightTrackingFrequency.MANUAL,
        )
        db.add(user)
        logger.info("Created user for identity %s", external_id)
    else:
        # Preferences are owned by the user, not the identity provider
        user.name = name
        logger.info("Updated user for identity %s", external_id)
    await db.flush()
    return user


async def delete_from_identity(db: AsyncSession, external_id: str) -> bool:
    """Delete the user for a user.deleted event. Returns False when there was none."""
    user = await user_by_external_id(db, external_id)
    if user is None:
        logger.warning("Can't delete user, there is none for identity %s", external_id)
        return False
    await db.delete(user)
    await db.flush()
    logger.info("Deleted user for identity %s", external_id)
    return True


def apply_preferences(user: User, preferences: UserPreferences) -> None:
    """Merge preferences into the user; omitted optional fields keep their stored value."""
    for k, v in preferences.model_dump(exclude_none=True).items():
        setattr(user, k, v)


async def update_user(db: AsyncSession, user: User, payload: UserUpdate) -> User:
    data = payload.model_dump(exclude_unset=True, exclude={"preferences"})
    for k, v in data.items():
        setattr(user, k, v)
    if payload.preferences is not None:
        apply_preferences(user, payload.preferences)
    await db.flush()
    return user


async def update_preferences(db: AsyncSession, user: User, preferences: UserPreferences) -> User:
    apply_preferences(user, preferences)
    await db.flush()
    return user


async def record_body_weight(db: AsyncSession, user: User, payload: BodyWeightCreate) -> BodyWeightEntry:
    """Store a reading and make it the user's current body weight."""
    recorded_at = payload.recorded_at or datetime.now(timezone.utc)
    entry = BodyWeightEntry(
        user_id=user.id,
        weight=payload.weight,
        weight_unit=payload.weight_unit,
        note=payload.note,
        source=payload.source or BodyWeightSource.MANUAL,
        recorded_at=recorded_at,
    )
    db.add(entry)
    user.body_weight = payload.weight
    user.body_weight_unit = payload.weight_unit
    user.last_body_weight_update = recorded_at
    await db.flush()
    return entry


async def list_body_weight(db: AsyncSession, user: User, limit: int = 100) -> list[BodyWeightEntry]:
    result = await db.execute(
        select(BodyWeightEntry)
        .where(BodyWeightEntry.user_id == user.id)
        .order_by(BodyWeightEntry.recorded_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())
