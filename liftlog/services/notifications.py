"""Web push delivery through pywebpush (VAPID), with cleanup of gone subscriptions."""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi.concurrency import run_in_threadpool
import requests
from pywebpush import WebPushException, webpush
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.config import get_settings
from liftlog.core.constants import PUSH_GONE_STATUS_CODES
from liftlog.core.exceptions import ValidationFailedError
from liftlog.models.push_subscription import PushSubscription
from liftlog.services.push_subscriptions import list_active_subscriptions

logger = logging.getLogger(__name__)


@dataclass
class Delivery:
    endpoint: str
    success: bool
    status_code: int | None = None
    error: str | None = None

    @property
    def gone(self) -> bool:
        return self.status_code in PUSH_GONE_STATUS_CODES


def build_payload(title: str | None, message: str) -> str:
    return json.dumps(
        {
            "title": title or "Notification",
            "body": message,
            "icon": "/favicon.ico",
            "badge": "/favicon.ico",
        }
    )


def _send(subscription_info: dict, data: str) -> None:
    settings = get_settings()
    webpush(
        subscription_info=subscription_info,
        data=data,
        vapid_private_key=settings.vapid_private_key,
        vapid_claims={"sub": settings.vapid_subject},
    )


async def send_notification(subscription: PushSubscription, title: str | None, message: str) -> Delivery:
    """Deliver one notification; transport failures are reported, not raised."""
    try:
        await run_in_threadpool(_send, subscription.as_webpush_info(), build_payload(title, message))
    except WebPushException as e:
        status = e.response.status_code if e.response is not None else None
        logger.warning("Push delivery to %s failed (status=%s): %s", subscription.endpoint, status, e)
        return Delivery(subscription.endpoint, False, status_code=status, error=str(e))
    except requests.RequestException as e:
        logger.warning("Push delivery to %s failed: %s", subscription.endpoint, e)
        return Delivery(subscription.endpoint, False, error=str(e))
    return Delivery(subscription.endpoint, True)


async def notify_user(
    db: AsyncSession, user_id: uuid.UUID, title: str | None, message: str
) -> tuple[list[Delivery], int]:
    """
    Push to every active subscription of the user. Subscriptions the transport reports
    as gone (404/410) are deleted. Returns (deliveries, removed_count).
    """
    if not get_settings().vapid_private_key:
        raise ValidationFailedError("Push notifications are not configured")

    deliveries: list[Delivery] = []
    removed = 0
    now = datetime.now(timezone.utc)
    for subscription in await list_active_subscriptions(db, user_id):
        delivery = await send_notification(subscription, title, message)
        deliveries.append(delivery)
        if delivery.success:
            subscription.last_used_at = now
        elif delivery.gone:
            await db.delete(subscription)
            removed += 1
            logger.info("Removed gone push subscription %s", subscription.id)
    await db.flush()
    return deliveries, removed
