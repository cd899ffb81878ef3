"""WorkoutSession, ExerciseSet and LoggedSet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.enums import WeightUnit
from liftlog.schemas.exercise import ExerciseRef


class LoggedSetBase(BaseModel):
    reps: int = Field(..., ge=0, le=1000)
    weight: float = Field(..., ge=0, le=5000)
    notes: str | None = Field(None, max_length=500)
    rest_time: int | None = Field(None, ge=0, le=3600)


class LoggedSetCreate(LoggedSetBase):
    weight_unit: WeightUnit
    is_body_weight: bool = False


class LoggedSetRead(LoggedSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    weight_unit: WeightUnit
    is_body_weight: bool = False


class ExerciseSetCreate(BaseModel):
    exercise_id: UUID
    order: int = 0


class ExerciseSetActiveUpdate(BaseModel):
    is_active: bool


class ExerciseSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_session_id: UUID
    exercise_id: UUID
    order: int
    is_active: bool = False
    exercise: ExerciseRef | None = None
    logged_sets: list[LoggedSetRead] = []


class WorkoutSessionCreate(BaseModel):
    split_id: UUID | None = None


class WorkoutSessionActiveUpdate(BaseModel):
    is_active: bool


class WorkoutSessionComplete(BaseModel):
    notes: str | None = Field(None, max_length=5000)


class WorkoutSessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    split_id: UUID | None = None
    started_at: datetime
    completed_at: datetime | None = None
    notes: str | None = None
    is_active: bool


class WorkoutSessionReadWithSets(WorkoutSessionRead):
    """Session with nested exercise sets (for the live workout / detail view)."""

    exercise_sets: list[ExerciseSetRead] = []
