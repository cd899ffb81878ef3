"""Exercise performance schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from liftlog.core.enums import WeightUnit


class PersonalBest(BaseModel):
    weight: float
    reps: int
    weight_unit: WeightUnit | None = None
    date: datetime | None = None
    is_body_weight: bool = False


class ExercisePerformanceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    exercise_id: UUID
    last_weight: float | None = None
    last_weight_unit: WeightUnit | None = None
    last_reps: int | None = None
    last_sets: int | None = None
    last_workout_date: datetime | None = None
    last_is_body_weight: bool | None = None
    personal_best: PersonalBest | None = None
    total_workouts: int = 0
