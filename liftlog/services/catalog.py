"""Built-in exercise catalog and an idempotent seeding routine."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.muscle_groups import ALL_MUSCLE_GROUPS
from liftlog.models.exercise import Exercise

logger = logging.getLogger(__name__)

# (name, equipment, muscle groups)
CATALOG: list[tuple[str, str | None, list[str]]] = [
    ("Bench Press", "barbell", ["chest", "triceps", "shoulders_front"]),
    ("Incline Dumbbell Press", "dumbbell", ["chest_upper", "shoulders_front", "triceps"]),
    ("Chest Fly", "cable", ["chest", "chest_inner"]),
    ("Push-Up", None, ["chest", "triceps", "core"]),
    ("Pull-Up", None, ["back_lats", "biceps"]),
    ("Barbell Row", "barbell", ["back_middle", "back_lats", "biceps"]),
    ("Lat Pulldown", "cable", ["back_lats", "biceps"]),
    ("Seated Cable Row", "cable", ["back_middle", "back_rhomboids"]),
    ("Deadlift", "barbell", ["back_lower", "hamstrings", "glutes"]),
    ("Overhead Press", "barbell", ["shoulders_front", "shoulders_middle", "triceps"]),
    ("Lateral Raise", "dumbbell", ["shoulders_middle"]),
    ("Face Pull", "cable", ["shoulders_rear", "back_trapezius"]),
    ("Barbell Curl", "barbell", ["biceps"]),
    ("Hammer Curl", "dumbbell", ["biceps_brachialis", "forearms_brachioradialis"]),
    ("Triceps Pushdown", "cable", ["triceps_lateral_head"]),
    ("Skull Crusher", "barbell", ["triceps_long_head"]),
    ("Back Squat", "barbell", ["quads", "glutes", "hamstrings"]),
    ("Romanian Deadlift", "barbell", ["hamstrings", "glutes", "lower_back"]),
    ("Leg Press", "machine", ["quads", "glutes"]),
    ("Leg Curl", "machine", ["hamstrings"]),
    ("Leg Extension", "machine", ["quads"]),
    ("Hip Thrust", "barbell", ["glutes_maximus", "hamstrings"]),
    ("Standing Calf Raise", "machine", ["calves_gastrocnemius"]),
    ("Plank", None, ["abs_transverse", "core"]),
    ("Hanging Leg Raise", None, ["abs_rectus", "hip_flexors"]),
]


async def seed_catalog(
    db: AsyncSession,
    entries: list[tuple[str, str | None, list[str]]] | None = None,
) -> int:
    """
    Insert catalog exercises that are not present yet (matched by name among
    non-custom exercises). Returns the number inserted; running twice inserts nothing.
    """
    entries = CATALOG if entries is None else entries
    result = await db.execute(select(Exercise.name).where(Exercise.is_custom.is_(False)))
    existing = set(result.scalars().all())

    added = 0
    for name, equipment, muscle_groups in entries:
        if name in existing:
            continue
        unknown = set(muscle_groups) - ALL_MUSCLE_GROUPS
        if unknown:
            raise ValueError(f"{name}: unknown muscle groups {sorted(unknown)}")
        db.add(
            Exercise(
                name=name,
                equipment=equipment,
                muscle_groups=list(muscle_groups),
                is_custom=False,
                user_id=None,
            )
        )
        existing.add(name)
        added += 1
    await db.flush()
    logger.info("Seeded %d catalog exercises (%d already present)", added, len(entries) - added)
    return added
