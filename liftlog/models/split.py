"""Split - a user's named, ordered list of exercises (training day or program)."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.db.base import Base, utcnow


class Split(Base):
    """Saved training split (name + exercises in order)."""

    __tablename__ = "splits"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    entries: Mapped[list["SplitExercise"]] = relationship(
        "SplitExercise",
        back_populates="split",
        cascade="all, delete-orphan",
        order_by="SplitExercise.order_in_split",
        lazy="selectin",
    )

    @property
    def exercise_ids(self) -> list[uuid.UUID]:
        return [e.exercise_id for e in self.entries]


class SplitExercise(Base):
    """Exercise reference inside a split (order only)."""

    __tablename__ = "split_exercises"
    __table_args__ = (UniqueConstraint("split_id", "exercise_id", name="uq_split_exercises_split_exercise"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    split_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("splits.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    order_in_split: Mapped[int] = mapped_column(Integer, default=0)

    split: Mapped["Split"] = relationship("Split", back_populates="entries")
