"""Push subscription reconciliation.

Ownership of a push endpoint is decided per request:

* endpoint already owned by the caller  -> refresh keys, reactivate, deactivate other owners' rows
* owned by someone else, same key pair  -> same device, reassign to the caller, deactivate siblings
* owned by someone else, other keys     -> leave untouched and report nothing to the caller
* unseen endpoint                       -> insert a new active subscription
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import SubscriptionOutcome
from liftlog.models.push_subscription import PushSubscription
from liftlog.schemas.push import PushSubscriptionCreate

logger = logging.getLogger(__name__)


def _deactivate_siblings(matches: list[PushSubscription], keep: PushSubscription, now: datetime) -> None:
    for s in matches:
        if s.id != keep.id and s.is_active:
            s.is_active = False
            s.updated_at = now


async def reconcile_subscription(
    db: AsyncSession, user_id: uuid.UUID, payload: PushSubscriptionCreate
) -> tuple[SubscriptionOutcome, PushSubscription | None]:
    """Apply a subscribe request; returns the outcome and the caller's record (None if ignored)."""
    now = datetime.now(timezone.utc)
    result = await db.execute(
        select(PushSubscription)
        .where(PushSubscription.endpoint == payload.endpoint)
        .order_by(PushSubscription.updated_at.desc())
    )
    matches = list(result.scalars().all())

    owned = next((s for s in matches if s.user_id == user_id), None)
    if owned is not None:
        owned.p256dh = payload.p256dh
        owned.auth = payload.auth
        if payload.user_agent is not None:
            owned.user_agent = payload.user_agent
        owned.is_active = True
        owned.updated_at = now
        owned.last_used_at = now
        _deactivate_siblings(matches, owned, now)
        await db.flush()
        logger.info("Refreshed push subscription %s for user %s", owned.id, user_id)
        return SubscriptionOutcome.REFRESHED, owned

    if matches:
        same_device = next((s for s in matches if s.keys_match(payload.p256dh, payload.auth)), None)
        if same_device is None:
            logger.warning(
                "Ignored push subscription for user %s: endpoint belongs to another user", user_id
            )
            return SubscriptionOutcome.IGNORED, None
        previous_owner = same_device.user_id
        same_device.user_id = user_id
        if payload.user_agent is not None:
            same_device.user_agent = payload.user_agent
        same_device.is_active = True
        same_device.updated_at = now
        same_device.last_used_at = now
        _deactivate_siblings(matches, same_device, now)
        await db.flush()
        logger.info(
            "Reassigned push subscription %s from user %s to user %s",
            same_device.id, previous_owner, user_id,
        )
        return SubscriptionOutcome.REASSIGNED, same_device

    subscription = PushSubscription(
        user_id=user_id,
        endpoint=payload.endpoint,
        p256dh=payload.p256dh,
        auth=payload.auth,
        user_agent=payload.user_agent,
        is_active=True,
        created_at=now,
        updated_at=now,
        last_used_at=now,
    )
    db.add(subscription)
    await db.flush()
    logger.info("Created push subscription %s for user %s", subscription.id, user_id)
    return SubscriptionOutcome.CREATED, subscription


async def list_active_subscriptions(db: AsyncSession, user_id: uuid.UUID) -> list[PushSubscription]:
    result = await db.execute(
        select(PushSubscription)
        .where(PushSubscription.user_id == user_id, PushSubscription.is_active.is_(True))
        .order_by(PushSubscription.updated_at.desc())
    )
    return list(result.scalars().all())


async def delete_subscription(db: AsyncSession, user_id: uuid.UUID, endpoint: str) -> int:
    """Remove the caller's records for an endpoint; other users' records are not touched."""
    result = await db.execute(
        delete(PushSubscription).where(
            PushSubscription.endpoint == endpoint,
            PushSubscription.user_id == user_id,
        )
    )
    return result.rowcount or 0
