"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from liftlog.core.muscle_groups import ALL_MUSCLE_GROUPS


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    muscle_groups: list[str] = Field(default_factory=list)
    equipment: str | None = Field(None, max_length=50)


class ExerciseCreate(ExerciseBase):
    """Custom exercise; tags must come from the muscle-group vocabulary."""

    @field_validator("muscle_groups")
    @classmethod
    def _known_muscle_groups(cls, value: list[str]) -> list[str]:
        unknown = [tag for tag in value if tag not in ALL_MUSCLE_GROUPS]
        if unknown:
            raise ValueError(f"Unknown muscle groups: {', '.join(unknown)}")
        # Keep first occurrence order
        return list(dict.fromkeys(value))


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID | None = None
    is_custom: bool = False
    is_active: bool = True
    created_at: datetime | None = None


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in set responses (id + name only)."""

    id: UUID
    name: str
    muscle_groups: list[str] = []

    model_config = ConfigDict(from_attributes=True)
