"""Exercise model - catalog and per-user custom exercises tagged with muscle groups."""

from __future__ import annotations

import uuid

from sqlalchemy import JSON, Boolean, ForeignKey, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.db.base import Base, TimestampMixin


class Exercise(TimestampMixin, Base):
    """Exercise definition. Catalog rows have no owner; custom rows belong to one user."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # e.g. ["chest", "triceps", "shoulders_front"]
    muscle_groups: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list
    )
    equipment: Mapped[str | None] = mapped_column(String(50), nullable=True)  # barbell, dumbbell, ...
    is_custom: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def is_visible_to(self, user_id: uuid.UUID) -> bool:
        return not self.is_custom or self.user_id == user_id
