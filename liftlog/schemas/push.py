"""Push subscription and notification schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PushSubscriptionCreate(BaseModel):
    endpoint: str = Field(..., min_length=1, max_length=2048)
    p256dh: str = Field(..., min_length=1, max_length=255)
    auth: str = Field(..., min_length=1, max_length=255)
    user_agent: str | None = Field(None, max_length=500)


class PushSubscriptionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    endpoint: str
    user_agent: str | None = None
    is_active: bool
    updated_at: datetime
    last_used_at: datetime | None = None


class NotificationCreate(BaseModel):
    title: str | None = Field(None, max_length=120)
    message: str = Field(..., min_length=1, max_length=1000)


class NotificationDelivery(BaseModel):
    endpoint: str
    success: bool
    error: str | None = None


class NotificationResult(BaseModel):
    sent: int
    failed: int
    removed: int
    deliveries: list[NotificationDelivery] = []
