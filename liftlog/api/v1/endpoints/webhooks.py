"""Identity-provider webhooks (Clerk, delivered through Svix)."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession
from svix.webhooks import Webhook, WebhookVerificationError

from liftlog.core.config import get_settings
from liftlog.db.session import get_db
from liftlog.services.identity import delete_from_identity, upsert_from_identity

logger = logging.getLogger(__name__)
router = APIRouter()


def verify_event(body: bytes, headers: dict[str, str]) -> dict:
    """Check the Svix signature headers and return the decoded event."""
    secret = get_settings().clerk_webhook_secret
    if not secret:
        logger.error("Webhook received but CLERK_WEBHOOK_SECRET is not set")
        raise HTTPException(status_code=500, detail="Webhook verification not configured")
    try:
        Webhook(secret).verify(body, headers)
    except WebhookVerificationError:
        raise HTTPException(status_code=400, detail="Invalid webhook signature")
    return json.loads(body)


@router.post("/clerk")
async def clerk_webhook(request: Request, db: AsyncSession = Depends(get_db)):
    """Sync users on user.created / user.updated / user.deleted; other events are acknowledged."""
    event = verify_event(await request.body(), dict(request.headers))
    event_type = event.get("type")
    data = event.get("data") or {}

    if event_type in ("user.created", "user.updated"):
        user = await upsert_from_identity(db, data)
        return {"status": "ok", "user_id": str(user.id)}
    if event_type == "user.deleted":
        if data.get("id"):
            await delete_from_identity(db, data["id"])
        return {"status": "ok"}

    logger.info("Ignored Clerk webhook event %s", event_type)
    return {"status": "ignored"}
