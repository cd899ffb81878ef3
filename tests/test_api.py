"""HTTP-level tests: routing, status codes and error rendering."""

import uuid

import pytest

from liftlog.main import app
from liftlog.api.deps import get_current_user

API = "/api/v1"


class TestAuth:
    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, client):
        app.dependency_overrides.pop(get_current_user, None)

        response = await client.get(f"{API}/users/me")

        assert response.status_code == 401
        assert "Missing authentication" in response.json()["detail"]


class TestUsers:
    @pytest.mark.asyncio
    async def test_me_includes_preferences(self, client, login, alice):
        login(alice)

        response = await client.get(f"{API}/users/me")

        assert response.status_code == 200
        body = response.json()
        assert body["external_id"] == "user_alice"
        assert body["preferences"] == {
            "default_weight_unit": "lbs",
            "default_rest_time": 60,
            "weight_tracking_frequency": "manual",
        }

    @pytest.mark.asyncio
    async def test_patch_preferences(self, client, login, alice):
        login(alice)

        response = await client.patch(
            f"{API}/users/me/preferences", json={"preferences": {"default_weight_unit": "kg"}}
        )

        assert response.status_code == 200
        assert response.json()["preferences"]["default_weight_unit"] == "kg"
        assert response.json()["preferences"]["default_rest_time"] == 60

    @pytest.mark.asyncio
    async def test_body_weight_history(self, client, login, alice):
        login(alice)

        created = await client.post(f"{API}/users/me/body-weight", json={"weight": 180, "weight_unit": "lbs"})
        listed = await client.get(f"{API}/users/me/body-weight")

        assert created.status_code == 201
        assert [e["weight"] for e in listed.json()] == [180]


class TestExercises:
    @pytest.mark.asyncio
    async def test_list_hides_other_users_custom_exercises(self, client, login, bob, bench, alice_custom):
        login(bob)

        response = await client.get(f"{API}/exercises")

        assert [e["name"] for e in response.json()] == ["Bench Press"]

    @pytest.mark.asyncio
    async def test_list_filters_by_muscle_group(self, client, login, alice, bench, squat, alice_custom):
        login(alice)

        response = await client.get(f"{API}/exercises", params={"muscle_group": "glutes"})

        assert [e["name"] for e in response.json()] == ["Back Squat"]

    @pytest.mark.asyncio
    async def test_unknown_muscle_group_filter(self, client, login, alice):
        login(alice)

        response = await client.get(f"{API}/exercises", params={"muscle_group": "wings"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_custom_exercise_visibility(self, client, login, alice, bob):
        login(alice)
        created = await client.post(
            f"{API}/exercises", json={"name": "Zercher Squat", "muscle_groups": ["quads", "core"]}
        )
        assert created.status_code == 201
        exercise_id = created.json()["id"]
        assert created.json()["is_custom"] is True

        assert (await client.get(f"{API}/exercises/{exercise_id}")).status_code == 200
        login(bob)
        forbidden = await client.get(f"{API}/exercises/{exercise_id}")
        assert forbidden.status_code == 403
        assert forbidden.json()["detail"] == "You are not allowed to access this exercise"

    @pytest.mark.asyncio
    async def test_missing_exercise_is_404(self, client, login, alice):
        login(alice)

        response = await client.get(f"{API}/exercises/{uuid.uuid4()}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_performance_is_null_before_first_workout(self, client, login, alice, bench):
        login(alice)

        response = await client.get(f"{API}/exercises/{bench.id}/performance")

        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_muscle_groups(self, client, login, alice):
        login(alice)

        response = await client.get(f"{API}/muscle-groups")

        assert "back_lats" in response.json()["back"]


class TestSplits:
    @pytest.mark.asyncio
    async def test_name_validation(self, client, login, alice):
        login(alice)

        assert (await client.post(f"{API}/splits", json={"name": "ab"})).status_code == 422
        assert (await client.post(f"{API}/splits", json={"name": "x" * 51})).status_code == 422
        assert (await client.post(f"{API}/splits", json={"name": "abc"})).status_code == 201

    @pytest.mark.asyncio
    async def test_create_with_name_only_and_list(self, client, login, alice, bench):
        login(alice)

        response = await client.post(f"{API}/splits", json={"name": "Push Day"})
        assert response.status_code == 201
        assert response.json()["exercises"] == []
        await client.post(f"{API}/splits", json={"name": "Chest", "exercise_ids": [str(bench.id)]})

        listed = (await client.get(f"{API}/splits")).json()
        assert {s["name"]: [e["name"] for e in s["exercises"]] for s in listed} == {
            "Push Day": [],
            "Chest": ["Bench Press"],
        }

    @pytest.mark.asyncio
    async def test_add_exercises_and_fetch(self, client, login, alice, bob, bench, squat):
        login(alice)
        split_id = (await client.post(f"{API}/splits", json={"name": "Legs", "exercise_ids": [str(squat.id)]})).json()["id"]

        response = await client.post(
            f"{API}/splits/{split_id}/exercises", json={"exercise_ids": [str(squat.id), str(bench.id)]}
        )

        assert [e["name"] for e in response.json()["exercises"]] == ["Back Squat", "Bench Press"]
        login(bob)
        assert (await client.get(f"{API}/splits/{split_id}")).status_code == 403


class TestWorkoutFlow:
    @pytest.mark.asyncio
    async def test_log_complete_and_read_performance(self, client, login, alice, bench):
        login(alice)
        session = (await client.post(f"{API}/workout-sessions", json={})).json()
        exercise_set = (
            await client.post(
                f"{API}/workout-sessions/{session['id']}/exercise-sets", json={"exercise_id": str(bench.id)}
            )
        ).json()
        assert exercise_set["exercise"]["name"] == "Bench Press"

        for weight, reps in [(135, 10), (185, 5), (185, 4)]:
            response = await client.post(
                f"{API}/exercise-sets/{exercise_set['id']}/sets",
                json={"weight": weight, "reps": reps, "weight_unit": "lbs"},
            )
            assert response.status_code == 201
        assert [s["reps"] for s in response.json()["logged_sets"]] == [10, 5, 4]

        completed = await client.post(f"{API}/workout-sessions/{session['id']}/complete", json={"notes": "PR day"})
        assert completed.json()["is_active"] is False
        assert completed.json()["notes"] == "PR day"

        performance = (await client.get(f"{API}/exercises/{bench.id}/performance")).json()
        assert performance["personal_best"]["weight"] == 185
        assert performance["personal_best"]["reps"] == 5
        assert performance["last_sets"] == 3
        assert performance["total_workouts"] == 1

        detail = await client.get(f"{API}/workout-sessions/{session['id']}")
        assert len(detail.json()["exercise_sets"]) == 1

    @pytest.mark.asyncio
    async def test_other_users_session_is_403(self, client, login, alice, bob):
        login(alice)
        session_id = (await client.post(f"{API}/workout-sessions", json={})).json()["id"]

        login(bob)

        assert (await client.get(f"{API}/workout-sessions/{session_id}")).status_code == 403
        assert (await client.delete(f"{API}/workout-sessions/{session_id}")).status_code == 403

    @pytest.mark.asyncio
    async def test_delete_session(self, client, login, alice):
        login(alice)
        session_id = (await client.post(f"{API}/workout-sessions", json={})).json()["id"]

        assert (await client.delete(f"{API}/workout-sessions/{session_id}")).status_code == 204
        assert (await client.get(f"{API}/workout-sessions/{session_id}")).status_code == 404


class TestPush:
    @pytest.mark.asyncio
    async def test_subscribe_is_204_even_when_ignored(self, client, login, alice, bob):
        subscription = {"endpoint": "https://push.example.com/x", "p256dh": "k", "auth": "a"}
        login(alice)
        assert (await client.post(f"{API}/push/subscriptions", json=subscription)).status_code == 204

        login(bob)
        hijack = {**subscription, "p256dh": "other"}
        assert (await client.post(f"{API}/push/subscriptions", json=hijack)).status_code == 204
        assert (await client.get(f"{API}/push/subscriptions")).json() == []

        login(alice)
        listed = (await client.get(f"{API}/push/subscriptions")).json()
        assert [s["endpoint"] for s in listed] == ["https://push.example.com/x"]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, client, login, alice):
        login(alice)
        subscription = {"endpoint": "https://push.example.com/y", "p256dh": "k", "auth": "a"}
        await client.post(f"{API}/push/subscriptions", json=subscription)

        response = await client.delete(f"{API}/push/subscriptions", params={"endpoint": subscription["endpoint"]})

        assert response.status_code == 204
        assert (await client.get(f"{API}/push/subscriptions")).json() == []


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get(f"{API}/health")
        assert response.json()["status"] == "ok"
