"""Initial schema: users, body weight history, exercises, splits.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

weight_unit = postgresql.ENUM("LBS", "KG", name="weightunit", create_type=False)
tracking_frequency = postgresql.ENUM("WEEKLY", "MONTHLY", "MANUAL", name="weighttrackingfrequency", create_type=False)
body_weight_source = postgresql.ENUM("MANUAL", "PROMPTED", "WORKOUT", name="bodyweightsource", create_type=False)


def upgrade() -> None:
    # Create enum types first (shared by several tables)
    op.execute("CREATE TYPE weightunit AS ENUM ('LBS', 'KG')")
    op.execute("CREATE TYPE weighttrackingfrequency AS ENUM ('WEEKLY', 'MONTHLY', 'MANUAL')")
    op.execute("CREATE TYPE bodyweightsource AS ENUM ('MANUAL', 'PROMPTED', 'WORKOUT')")

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("external_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("body_weight", sa.Float(), nullable=True),
        sa.Column("body_weight_unit", weight_unit, nullable=True),
        sa.Column("last_body_weight_update", sa.DateTime(timezone=True), nullable=True),
        sa.Column("default_weight_unit", weight_unit, nullable=False, server_default="LBS"),
        sa.Column("default_rest_time", sa.Integer(), nullable=True, server_default="60"),
        sa.Column("weight_tracking_frequency", tracking_frequency, nullable=True, server_default="MANUAL"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_external_id"), "users", ["external_id"], unique=True)

    op.create_table(
        "body_weight_history",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("weight_unit", weight_unit, nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("note", sa.String(length=500), nullable=True),
        sa.Column("source", body_weight_source, nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_body_weight_history_user_recorded", "body_weight_history", ["user_id", "recorded_at"])

    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_groups", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default="[]"),
        sa.Column("equipment", sa.String(length=50), nullable=True),
        sa.Column("is_custom", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_user_id"), "exercises", ["user_id"], unique=False)
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)

    op.create_table(
        "splits",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_splits_user_id"), "splits", ["user_id"], unique=False)

    op.create_table(
        "split_exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("split_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("order_in_split", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["split_id"], ["splits.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("split_id", "exercise_id", name="uq_split_exercises_split_exercise"),
    )
    op.create_index(op.f("ix_split_exercises_split_id"), "split_exercises", ["split_id"], unique=False)


def downgrade() -> None:
    op.drop_table("split_exercises")
    op.drop_table("splits")
    op.drop_table("exercises")
    op.drop_table("body_weight_history")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS bodyweightsource")
    op.execute("DROP TYPE IF EXISTS weighttrackingfrequency")
    op.execute("DROP TYPE IF EXISTS weightunit")
