"""WorkoutSession, ExerciseSet and LoggedSet models."""

from __future__ import annotations

from datetime import datetime
from sqlalchemy import Boolean, DateTime, Enum, Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
import uuid

from liftlog.core.enums import WeightUnit
from liftlog.db.base import Base, utcnow
from liftlog.models.exercise import Exercise


class WorkoutSession(Base):
    """A workout: active until completed_at is set."""

    __tablename__ = "workout_sessions"
    __table_args__ = (
        Index("ix_workout_sessions_user_id", "user_id"),
        Index("ix_workout_sessions_user_active", "user_id", "is_active"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    split_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("splits.id", ondelete="SET NULL"), nullable=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    exercise_sets: Mapped[list["ExerciseSet"]] = relationship(
        "ExerciseSet",
        back_populates="workout_session",
        cascade="all, delete-orphan",
        order_by="ExerciseSet.order",
    )


class ExerciseSet(Base):
    """All sets of one exercise within one session; logged sets are append/remove only."""

    __tablename__ = "exercise_sets"
    __table_args__ = (
        Index("ix_exercise_sets_workout_session_id", "workout_session_id"),
        Index("ix_exercise_sets_exercise_id", "exercise_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False)
    order: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)  # Exercise currently being performed
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    workout_session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="exercise_sets")
    exercise: Mapped["Exercise"] = relationship("Exercise", lazy="selectin")
    logged_sets: Mapped[list["LoggedSet"]] = relationship(
        "LoggedSet",
        back_populates="exercise_set",
        cascade="all, delete-orphan",
        order_by="LoggedSet.position",
        lazy="selectin",
    )


class LoggedSet(Base):
    """One performed set: reps at a weight, optionally bodyweight, with rest and notes."""

    __tablename__ = "logged_sets"
    __table_args__ = (Index("ix_logged_sets_exercise_set_id", "exercise_set_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_set_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercise_sets.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, default=0)  # Append order within the exercise set
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    weight_unit: Mapped[WeightUnit] = mapped_column(Enum(WeightUnit), nullable=False)
    is_body_weight: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    rest_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)

    exercise_set: Mapped["ExerciseSet"] = relationship("ExerciseSet", back_populates="logged_sets")
