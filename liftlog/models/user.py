"""User model (synced from the identity provider) and body-weight history."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.core.constants import DEFAULT_REST_TIME_SECONDS
from liftlog.core.enums import BodyWeightSource, WeightTrackingFrequency, WeightUnit
from liftlog.db.base import Base, TimestampMixin, utcnow


class User(TimestampMixin, Base):
    """Internal user record keyed by the identity provider's subject id."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    external_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    body_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    body_weight_unit: Mapped[WeightUnit | None] = mapped_column(Enum(WeightUnit), nullable=True)
    last_body_weight_update: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Preferences
    default_weight_unit: Mapped[WeightUnit] = mapped_column(
        Enum(WeightUnit), default=WeightUnit.LBS, nullable=False
    )
    default_rest_time: Mapped[int | None] = mapped_column(Integer, default=DEFAULT_REST_TIME_SECONDS)
    weight_tracking_frequency: Mapped[WeightTrackingFrequency | None] = mapped_column(
        Enum(WeightTrackingFrequency), default=WeightTrackingFrequency.MANUAL
    )

    body_weight_history: Mapped[list["BodyWeightEntry"]] = relationship(
        "BodyWeightEntry", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def preferences(self) -> dict:
        return {
            "default_weight_unit": self.default_weight_unit,
            "default_rest_time": self.default_rest_time,
            "weight_tracking_frequency": self.weight_tracking_frequency,
        }


class BodyWeightEntry(Base):
    """A single body-weight reading."""

    __tablename__ = "body_weight_history"
    __table_args__ = (Index("ix_body_weight_history_user_recorded", "user_id", "recorded_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    weight_unit: Mapped[WeightUnit] = mapped_column(Enum(WeightUnit), nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    note: Mapped[str | None] = mapped_column(String(500), nullable=True)
    source: Mapped[BodyWeightSource | None] = mapped_column(Enum(BodyWeightSource), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="body_weight_history")
