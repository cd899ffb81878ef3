"""ORM models - import all so Base.metadata is complete for migrations."""

from liftlog.models.exercise import Exercise
from liftlog.models.performance import ExercisePerformance
from liftlog.models.push_subscription import PushSubscription
from liftlog.models.split import Split, SplitExercise
from liftlog.models.user import BodyWeightEntry, User
from liftlog.models.workout import ExerciseSet, LoggedSet, WorkoutSession

__all__ = [
    "BodyWeightEntry",
    "Exercise",
    "ExercisePerformance",
    "ExerciseSet",
    "LoggedSet",
    "PushSubscription",
    "Split",
    "SplitExercise",
    "User",
    "WorkoutSession",
]
