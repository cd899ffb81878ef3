"""Tests for the split registry."""

import uuid

import pytest
from pydantic import ValidationError
from sqlalchemy import event

from liftlog.core.exceptions import AuthorizationError, NotFoundError
from liftlog.schemas.split import SplitAddExercises, SplitCreate
from liftlog.services import splits as split_service


class TestSplitValidation:
    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            SplitCreate(name="ab")

    def test_name_minimum_length(self):
        assert SplitCreate(name="abc").name == "abc"

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            SplitCreate(name="x" * 51)

    def test_name_maximum_length(self):
        assert len(SplitCreate(name="x" * 50).name) == 50

    def test_description_bounds(self):
        assert SplitCreate(name="Push", description="d" * 500).description == "d" * 500
        with pytest.raises(ValidationError):
            SplitCreate(name="Push", description="d" * 501)

    def test_add_requires_at_least_one_exercise(self):
        with pytest.raises(ValidationError):
            SplitAddExercises(exercise_ids=[])


class TestMergeExerciseIds:
    def test_keeps_existing_order_and_drops_duplicates(self):
        a, b, c = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        assert split_service.merge_exercise_ids([a, b], [b, c, a, c]) == [a, b, c]


class TestSplitService:
    @pytest.mark.asyncio
    async def test_create_keeps_exercise_order(self, db, alice, bench, squat):
        split = await split_service.create_split(
            db, alice.id, SplitCreate(name="Full Body", exercise_ids=[squat.id, bench.id, squat.id])
        )

        assert split.exercise_ids == [squat.id, bench.id]
        exercises = await split_service.resolve_exercises(db, split)
        assert [e.name for e in exercises] == ["Back Squat", "Bench Press"]

    @pytest.mark.asyncio
    async def test_create_with_name_only_then_extend(self, db, alice, bench):
        split = await split_service.create_split(db, alice.id, SplitCreate(name="Push Day"))

        assert split.exercise_ids == []
        assert await split_service.resolve_exercises(db, split) == []
        split = await split_service.add_exercises_to_split(db, alice.id, split.id, [bench.id])
        assert [e.name for e in await split_service.resolve_exercises(db, split)] == ["Bench Press"]

    @pytest.mark.asyncio
    async def test_resolving_many_splits_runs_one_query(self, db, engine, alice, bench, squat):
        legs = await split_service.create_split(db, alice.id, SplitCreate(name="Legs", exercise_ids=[squat.id]))
        push = await split_service.create_split(
            db, alice.id, SplitCreate(name="Push", exercise_ids=[bench.id, squat.id])
        )
        empty = await split_service.create_split(db, alice.id, SplitCreate(name="Rest"))
        statements = []

        @event.listens_for(engine.sync_engine, "before_cursor_execute")
        def _record(conn, cursor, statement, parameters, context, executemany):
            statements.append(statement)

        try:
            resolved = await split_service.resolve_exercises_for(db, [legs, push, empty])
        finally:
            event.remove(engine.sync_engine, "before_cursor_execute", _record)

        assert len(statements) == 1
        assert [e.name for e in resolved[legs.id]] == ["Back Squat"]
        assert [e.name for e in resolved[push.id]] == ["Bench Press", "Back Squat"]
        assert resolved[empty.id] == []

    @pytest.mark.asyncio
    async def test_create_rejects_other_users_custom_exercise(self, db, bob, alice_custom):
        with pytest.raises(AuthorizationError):
            await split_service.create_split(
                db, bob.id, SplitCreate(name="Shoulders", exercise_ids=[alice_custom.id])
            )

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_exercise(self, db, alice):
        with pytest.raises(NotFoundError):
            await split_service.create_split(
                db, alice.id, SplitCreate(name="Legs", exercise_ids=[uuid.uuid4()])
            )

    @pytest.mark.asyncio
    async def test_adding_same_exercise_twice_keeps_one_entry(self, db, alice, bench):
        split = await split_service.create_split(db, alice.id, SplitCreate(name="Push"))

        await split_service.add_exercises_to_split(db, alice.id, split.id, [bench.id])
        split = await split_service.add_exercises_to_split(db, alice.id, split.id, [bench.id])

        assert split.exercise_ids == [bench.id]

    @pytest.mark.asyncio
    async def test_add_bumps_updated_at_and_list_order(self, db, alice, bench):
        older = await split_service.create_split(db, alice.id, SplitCreate(name="Pull"))
        newer = await split_service.create_split(db, alice.id, SplitCreate(name="Push"))
        before = older.updated_at

        await split_service.add_exercises_to_split(db, alice.id, older.id, [bench.id])

        assert older.updated_at > before
        listed = await split_service.list_splits(db, alice.id)
        assert [s.id for s in listed] == [older.id, newer.id]

    @pytest.mark.asyncio
    async def test_list_only_returns_own_splits(self, db, alice, bob):
        await split_service.create_split(db, alice.id, SplitCreate(name="Alice Day"))
        await split_service.create_split(db, bob.id, SplitCreate(name="Bob Day"))

        listed = await split_service.list_splits(db, bob.id)
        assert [s.name for s in listed] == ["Bob Day"]

    @pytest.mark.asyncio
    async def test_fetch_other_users_split_is_forbidden(self, db, alice, bob):
        split = await split_service.create_split(db, alice.id, SplitCreate(name="Alice Day"))

        with pytest.raises(AuthorizationError):
            await split_service.get_split(db, bob.id, split.id)
        with pytest.raises(AuthorizationError):
            await split_service.add_exercises_to_split(db, bob.id, split.id, [])

    @pytest.mark.asyncio
    async def test_missing_split(self, db, alice):
        with pytest.raises(NotFoundError):
            await split_service.get_split(db, alice.id, uuid.uuid4())
