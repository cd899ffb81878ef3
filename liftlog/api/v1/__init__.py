"""API v1 router aggregation."""

from fastapi import APIRouter

from liftlog.api.v1.endpoints import (
    exercise_sets,
    exercises,
    health,
    muscle_groups,
    push,
    splits,
    users,
    webhooks,
    workout_sessions,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(webhooks.router, prefix="/webhooks", tags=["webhooks"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(muscle_groups.router, prefix="/muscle-groups", tags=["muscle-groups"])
api_router.include_router(splits.router, prefix="/splits", tags=["splits"])
api_router.include_router(workout_sessions.router, prefix="/workout-sessions", tags=["workout-sessions"])
api_router.include_router(exercise_sets.router, prefix="/exercise-sets", tags=["exercise-sets"])
api_router.include_router(push.router, prefix="/push", tags=["push"])
