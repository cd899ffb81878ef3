"""Push subscriptions and test notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import get_current_user
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.push import (
    NotificationCreate,
    NotificationDelivery,
    NotificationResult,
    PushSubscriptionCreate,
    PushSubscriptionRead,
)
from liftlog.services import notifications, push_subscriptions

router = APIRouter()


@router.post("/subscriptions", status_code=204)
async def subscribe(
    payload: PushSubscriptionCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Register this device's push endpoint. Always 204: whether the endpoint was created,
    refreshed, reassigned or left alone (owned by another account) is not disclosed.
    """
    await push_subscriptions.reconcile_subscription(db, user.id, payload)
    return None


@router.get("/subscriptions", response_model=list[PushSubscriptionRead])
async def list_subscriptions(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await push_subscriptions.list_active_subscriptions(db, user.id)


@router.delete("/subscriptions", status_code=204)
async def unsubscribe(
    endpoint: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await push_subscriptions.delete_subscription(db, user.id, endpoint)
    return None


@router.post("/notify", response_model=NotificationResult)
async def notify(
    payload: NotificationCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Send a notification to all of the caller's devices; gone subscriptions are removed."""
    deliveries, removed = await notifications.notify_user(db, user.id, payload.title, payload.message)
    return NotificationResult(
        sent=sum(1 for d in deliveries if d.success),
        failed=sum(1 for d in deliveries if not d.success),
        removed=removed,
        deliveries=[
            NotificationDelivery(endpoint=d.endpoint, success=d.success, error=d.error)
            for d in deliveries
        ],
    )
