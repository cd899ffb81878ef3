"""User, preferences and body-weight schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.enums import BodyWeightSource, WeightTrackingFrequency, WeightUnit


# ── Preferences ──────────────────────────────────────────────────────────

class UserPreferences(BaseModel):
    default_weight_unit: WeightUnit
    default_rest_time: Optional[int] = Field(None, ge=0, le=3600, description="Rest timer in seconds")
    weight_tracking_frequency: Optional[WeightTrackingFrequency] = None


class UserPreferencesUpdate(BaseModel):
    preferences: UserPreferences


# ── User ─────────────────────────────────────────────────────────────────

class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    external_id: str
    name: str
    body_weight: Optional[float] = None
    body_weight_unit: Optional[WeightUnit] = None
    last_body_weight_update: Optional[datetime] = None
    preferences: UserPreferences


class UserUpdate(BaseModel):
    body_weight: Optional[float] = Field(None, gt=0, lt=1500)
    body_weight_unit: Optional[WeightUnit] = None
    last_body_weight_update: Optional[datetime] = None
    preferences: Optional[UserPreferences] = None


# ── Body weight history ──────────────────────────────────────────────────

class BodyWeightCreate(BaseModel):
    weight: float = Field(..., gt=0, lt=1500)
    weight_unit: WeightUnit
    note: Optional[str] = Field(None, max_length=500)
    source: BodyWeightSource = BodyWeightSource.MANUAL
    recorded_at: Optional[datetime] = None


class BodyWeightRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    weight: float
    weight_unit: WeightUnit
    recorded_at: datetime
    note: Optional[str] = None
    source: Optional[BodyWeightSource] = None
