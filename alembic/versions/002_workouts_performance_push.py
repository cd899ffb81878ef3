"""Workout sessions, exercise sets, logged sets, exercise performance, push subscriptions.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

weight_unit = postgresql.ENUM("LBS", "KG", name="weightunit", create_type=False)


def upgrade() -> None:
    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("split_id", sa.Uuid(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["split_id"], ["splits.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sessions_user_id", "workout_sessions", ["user_id"])
    op.create_index("ix_workout_sessions_user_active", "workout_sessions", ["user_id", "is_active"])

    op.create_table(
        "exercise_sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("workout_session_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["workout_session_id"], ["workout_sessions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_exercise_sets_workout_session_id", "exercise_sets", ["workout_session_id"])
    op.create_index("ix_exercise_sets_exercise_id", "exercise_sets", ["exercise_id"])

    op.create_table(
        "logged_sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("exercise_set_id", sa.Uuid(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("weight_unit", weight_unit, nullable=False),
        sa.Column("is_body_weight", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("rest_time", sa.Integer(), nullable=True),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(["exercise_set_id"], ["exercise_sets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_logged_sets_exercise_set_id", "logged_sets", ["exercise_set_id"])

    op.create_table(
        "exercise_performance",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("last_weight", sa.Float(), nullable=True),
        sa.Column("last_weight_unit", weight_unit, nullable=True),
        sa.Column("last_reps", sa.Integer(), nullable=True),
        sa.Column("last_sets", sa.Integer(), nullable=True),
        sa.Column("last_workout_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_is_body_weight", sa.Boolean(), nullable=True),
        sa.Column("pb_weight", sa.Float(), nullable=True),
        sa.Column("pb_weight_unit", weight_unit, nullable=True),
        sa.Column("pb_reps", sa.Integer(), nullable=True),
        sa.Column("pb_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("pb_is_body_weight", sa.Boolean(), nullable=True),
        sa.Column("total_workouts", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "exercise_id", name="uq_exercise_performance_user_exercise"),
    )
    op.create_index(op.f("ix_exercise_performance_user_id"), "exercise_performance", ["user_id"], unique=False)

    op.create_table(
        "push_subscriptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("endpoint", sa.Text(), nullable=False),
        sa.Column("p256dh", sa.String(length=255), nullable=False),
        sa.Column("auth", sa.String(length=255), nullable=False),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("last_used_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_push_subscriptions_endpoint", "push_subscriptions", ["endpoint"])
    op.create_index("ix_push_subscriptions_user_active", "push_subscriptions", ["user_id", "is_active"])


def downgrade() -> None:
    op.drop_index("ix_push_subscriptions_user_active", table_name="push_subscriptions")
    op.drop_index("ix_push_subscriptions_endpoint", table_name="push_subscriptions")
    op.drop_table("push_subscriptions")
    op.drop_table("exercise_performance")
    op.drop_table("logged_sets")
    op.drop_table("exercise_sets")
    op.drop_table("workout_sessions")
