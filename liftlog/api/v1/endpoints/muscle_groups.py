"""Muscle-group vocabulary used to tag exercises."""

from fastapi import APIRouter

from liftlog.core.muscle_groups import MUSCLE_GROUPS

router = APIRouter()


@router.get("", response_model=dict[str, list[str]])
async def list_muscle_groups():
    """Tags grouped by body region (chest, back, ..., full_body)."""
    return {region: list(tags) for region, tags in MUSCLE_GROUPS.items()}
