"""Liveness and readiness probes."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.config import get_settings
from liftlog.db.session import get_db
from liftlog.models.exercise import Exercise

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """Process is up. Reports BACKEND_BUILT_AT when the deploy sets it."""
    settings = get_settings()
    payload: dict = {"status": "ok", "app": settings.app_name, "environment": settings.environment}
    if built_at := os.environ.get("BACKEND_BUILT_AT"):
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Database reachable and migrated (the exercise catalog can be counted)."""
    try:
        catalog_size = (
            await db.execute(select(func.count()).select_from(Exercise).where(Exercise.is_custom.is_(False)))
        ).scalar_one()
    except SQLAlchemyError as e:
        logger.error("Readiness check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "error", "database": "unavailable"})
    return {"status": "ok", "database": "connected", "catalog_exercises": catalog_size}
