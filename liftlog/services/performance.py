"""Performance aggregation: best set, personal best and last-performed snapshot per (user, exercise).

A session's "best set" is the heaviest one, with reps as the tie-break. Weights logged
in different units are compared in kg. Personal bests only move on strict improvement.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.constants import KG_PER_LB
from liftlog.core.enums import WeightUnit
from liftlog.models.performance import ExercisePerformance
from liftlog.models.workout import ExerciseSet, LoggedSet, WorkoutSession
from liftlog.services.units import convert_weight

logger = logging.getLogger(__name__)


class SetLike(Protocol):
    weight: float
    reps: int


def _unit(s: SetLike) -> WeightUnit | None:
    unit = getattr(s, "weight_unit", None)
    return WeightUnit(unit) if unit is not None else None


def _comparable_weights(a: SetLike, b: SetLike) -> tuple[float, float]:
    """Raw weights when the units agree, unrounded kg otherwise."""
    ua, ub = _unit(a), _unit(b)
    if ua == ub or ua is None or ub is None:
        return float(a.weight), float(b.weight)

    def kg(value: float, unit: WeightUnit) -> float:
        return value * KG_PER_LB if unit == WeightUnit.LBS else value

    return kg(float(a.weight), ua), kg(float(b.weight), ub)


def _beats(candidate: SetLike, current: SetLike) -> bool:
    cw, bw = _comparable_weights(candidate, current)
    return cw > bw or (cw == bw and candidate.reps > current.reps)


def compute_best_set(sets: Sequence[SetLike]) -> SetLike:
    """Heaviest set, ties broken by more reps; the earliest set wins a full tie."""
    if not sets:
        raise ValueError("compute_best_set() needs at least one set")
    best = sets[0]
    for s in sets[1:]:
        if _beats(s, best):
            best = s
    return best


def is_new_personal_best(
    weight: float,
    reps: int,
    existing_weight: float | None = None,
    existing_reps: int | None = None,
) -> bool:
    """Strict improvement over the existing PB (a missing PB counts as 0 x 0)."""
    ew = existing_weight if existing_weight is not None else 0
    er = existing_reps if existing_reps is not None else 0
    return weight > ew or (weight == ew and reps > er)


async def _get_performance(
    db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID
) -> ExercisePerformance | None:
    result = await db.execute(
        select(ExercisePerformance).where(
            ExercisePerformance.user_id == user_id,
            ExercisePerformance.exercise_id == exercise_id,
        )
    )
    return result.scalar_one_or_none()


async def _get_user_session(
    db: AsyncSession, user_id: uuid.UUID, workout_session_id: uuid.UUID
) -> WorkoutSession | None:
    session = await db.get(WorkoutSession, workout_session_id)
    if session is None or session.user_id != user_id:
        return None
    return session


async def _session_sets(
    db: AsyncSession, workout_session_id: uuid.UUID, exercise_id: uuid.UUID
) -> list[LoggedSet]:
    """Logged sets for one exercise in one session, in performed order."""
    result = await db.execute(
        select(LoggedSet)
        .join(ExerciseSet, ExerciseSet.id == LoggedSet.exercise_set_id)
        .where(
            ExerciseSet.workout_session_id == workout_session_id,
            ExerciseSet.exercise_id == exercise_id,
        )
        .order_by(ExerciseSet.order, ExerciseSet.created_at, LoggedSet.position)
    )
    return list(result.scalars().all())


async def count_total_workouts(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> int:
    """Number of the user's sessions holding at least one logged set for the exercise."""
    result = await db.execute(
        select(func.count(func.distinct(WorkoutSession.id)))
        .join(ExerciseSet, ExerciseSet.workout_session_id == WorkoutSession.id)
        .join(LoggedSet, LoggedSet.exercise_set_id == ExerciseSet.id)
        .where(WorkoutSession.user_id == user_id, ExerciseSet.exercise_id == exercise_id)
    )
    return int(result.scalar() or 0)


def _apply_personal_best(perf: ExercisePerformance, best: LoggedSet, session: WorkoutSession) -> None:
    perf.pb_weight = best.weight
    perf.pb_weight_unit = best.weight_unit
    perf.pb_reps = best.reps
    perf.pb_date = session.started_at
    perf.pb_is_body_weight = best.is_body_weight


def _apply_last_workout(
    perf: ExercisePerformance, best: LoggedSet, n_sets: int, session: WorkoutSession
) -> None:
    perf.last_weight = best.weight
    perf.last_weight_unit = best.weight_unit
    perf.last_reps = best.reps
    perf.last_sets = n_sets
    perf.last_workout_date = session.started_at
    perf.last_is_body_weight = best.is_body_weight


async def update_personal_best(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    workout_session_id: uuid.UUID,
) -> ExercisePerformance | None:
    """
    Promote the session's best set to personal best if it strictly improves on the stored one.
    No-op (returns None) when the session is missing or has no sets for the exercise.
    """
    session = await _get_user_session(db, user_id, workout_session_id)
    if session is None:
        return None
    sets = await _session_sets(db, workout_session_id, exercise_id)
    if not sets:
        return None

    best = compute_best_set(sets)
    perf = await _get_performance(db, user_id, exercise_id)

    candidate_weight = best.weight
    if perf is not None and perf.pb_weight_unit is not None:
        candidate_weight = convert_weight(best.weight, best.weight_unit, perf.pb_weight_unit)
    existing_weight = perf.pb_weight if perf is not None else None
    existing_reps = perf.pb_reps if perf is not None else None
    if not is_new_personal_best(candidate_weight, best.reps, existing_weight, existing_reps):
        return perf

    if perf is None:
        perf = ExercisePerformance(
            user_id=user_id,
            exercise_id=exercise_id,
            total_workouts=await count_total_workouts(db, user_id, exercise_id),
        )
        db.add(perf)
    _apply_personal_best(perf, best, session)
    await db.flush()
    logger.debug(
        "New personal best user=%s exercise=%s: %s %s x %s",
        user_id, exercise_id, best.weight, best.weight_unit.value, best.reps,
    )
    return perf


async def update_last_workout_data(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    workout_session_id: uuid.UUID,
) -> ExercisePerformance | None:
    """
    Overwrite the last-performed snapshot with this session's best set and set count,
    recount total workouts, and leave the personal best alone.
    No-op (returns None) when the session is missing or has no sets for the exercise.
    """
    session = await _get_user_session(db, user_id, workout_session_id)
    if session is None:
        return None
    sets = await _session_sets(db, workout_session_id, exercise_id)
    if not sets:
        return None

    best = compute_best_set(sets)
    total_workouts = await count_total_workouts(db, user_id, exercise_id)
    perf = await _get_performance(db, user_id, exercise_id)
    if perf is None:
        perf = ExercisePerformance(user_id=user_id, exercise_id=exercise_id)
        db.add(perf)
    _apply_last_workout(perf, best, len(sets), session)
    perf.total_workouts = total_workouts
    await db.flush()
    return perf


async def recalculate_exercise_performance(
    db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID
) -> ExercisePerformance | None:
    """
    Rebuild the record from whatever sets remain (e.g. after a session was deleted).
    Deletes the record when nothing is left; clears the last snapshot when no session
    containing the exercise is completed.
    """
    result = await db.execute(
        select(LoggedSet, WorkoutSession)
        .join(ExerciseSet, ExerciseSet.id == LoggedSet.exercise_set_id)
        .join(WorkoutSession, WorkoutSession.id == ExerciseSet.workout_session_id)
        .where(WorkoutSession.user_id == user_id, ExerciseSet.exercise_id == exercise_id)
        .order_by(WorkoutSession.started_at, ExerciseSet.order, LoggedSet.position)
    )
    rows = result.all()
    perf = await _get_performance(db, user_id, exercise_id)

    if not rows:
        if perf is not None:
            await db.delete(perf)
            await db.flush()
        return None

    if perf is None:
        perf = ExercisePerformance(user_id=user_id, exercise_id=exercise_id)
        db.add(perf)

    sessions: dict[uuid.UUID, WorkoutSession] = {}
    sets_by_session: dict[uuid.UUID, list[LoggedSet]] = {}
    session_of_set: dict[uuid.UUID, WorkoutSession] = {}
    for logged, session in rows:
        sessions[session.id] = session
        sets_by_session.setdefault(session.id, []).append(logged)
        session_of_set[logged.id] = session

    best = compute_best_set([logged for logged, _ in rows])
    _apply_personal_best(perf, best, session_of_set[best.id])
    perf.total_workouts = len(sessions)

    completed = [s for s in sessions.values() if s.completed_at is not None]
    if not completed:
        perf.clear_last_workout()
    else:
        last = max(completed, key=lambda s: s.completed_at)
        last_sets = sets_by_session[last.id]
        _apply_last_workout(perf, compute_best_set(last_sets), len(last_sets), last)

    await db.flush()
    return perf


async def get_performance(
    db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID
) -> ExercisePerformance | None:
    return await _get_performance(db, user_id, exercise_id)
