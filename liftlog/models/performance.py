"""ExercisePerformance - last-performed snapshot and personal best per (user, exercise)."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Float, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.core.enums import WeightUnit
from liftlog.db.base import Base


class ExercisePerformance(Base):
    """Derived summary, upserted whenever a session with this exercise completes."""

    __tablename__ = "exercise_performance"
    __table_args__ = (
        UniqueConstraint("user_id", "exercise_id", name="uq_exercise_performance_user_exercise"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )

    # Last performed (best set of the most recent session)
    last_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    last_weight_unit: Mapped[WeightUnit | None] = mapped_column(Enum(WeightUnit), nullable=True)
    last_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_workout_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_is_body_weight: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Personal best
    pb_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    pb_weight_unit: Mapped[WeightUnit | None] = mapped_column(Enum(WeightUnit), nullable=True)
    pb_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pb_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    pb_is_body_weight: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    total_workouts: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    @property
    def personal_best(self) -> dict | None:
        if self.pb_weight is None or self.pb_reps is None:
            return None
        return {
            "weight": self.pb_weight,
            "reps": self.pb_reps,
            "weight_unit": self.pb_weight_unit,
            "date": self.pb_date,
            "is_body_weight": bool(self.pb_is_body_weight),
        }

    def clear_personal_best(self) -> None:
        self.pb_weight = None
        self.pb_weight_unit = None
        self.pb_reps = None
        self.pb_date = None
        self.pb_is_body_weight = None

    def clear_last_workout(self) -> None:
        self.last_weight = None
        self.last_weight_unit = None
        self.last_reps = None
        self.last_sets = None
        self.last_workout_date = None
        self.last_is_body_weight = None
