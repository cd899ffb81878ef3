"""Split schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.constants import (
    SPLIT_DESCRIPTION_MAX_LENGTH,
    SPLIT_NAME_MAX_LENGTH,
    SPLIT_NAME_MIN_LENGTH,
)
from liftlog.schemas.exercise import ExerciseRead


class SplitCreate(BaseModel):
    name: str = Field(..., min_length=SPLIT_NAME_MIN_LENGTH, max_length=SPLIT_NAME_MAX_LENGTH)
    description: str | None = Field(None, max_length=SPLIT_DESCRIPTION_MAX_LENGTH)
    exercise_ids: list[UUID] = []


class SplitAddExercises(BaseModel):
    exercise_ids: list[UUID] = Field(..., min_length=1)


class SplitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
    exercises: list[ExerciseRead] = []
