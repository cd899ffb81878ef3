"""Tests for push subscription reconciliation and notification delivery."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
import requests
from pywebpush import WebPushException
from sqlalchemy import select

from liftlog.core.config import Settings
from liftlog.core.enums import SubscriptionOutcome
from liftlog.core.exceptions import ValidationFailedError
from liftlog.models.push_subscription import PushSubscription
from liftlog.schemas.push import PushSubscriptionCreate
from liftlog.services import notifications
from liftlog.services.push_subscriptions import (
    delete_subscription,
    list_active_subscriptions,
    reconcile_subscription,
)

ENDPOINT = "https://push.example.com/send/device-1"


def payload(p256dh="key-1", auth="auth-1", endpoint=ENDPOINT, user_agent=None):
    return PushSubscriptionCreate(endpoint=endpoint, p256dh=p256dh, auth=auth, user_agent=user_agent)


async def rows_for(db, endpoint=ENDPOINT):
    result = await db.execute(select(PushSubscription).where(PushSubscription.endpoint == endpoint))
    return list(result.scalars().all())


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------


class TestReconcile:
    @pytest.mark.asyncio
    async def test_unseen_endpoint_is_created(self, db, alice):
        outcome, sub = await reconcile_subscription(db, alice.id, payload(user_agent="Firefox"))

        assert outcome == SubscriptionOutcome.CREATED
        assert sub.user_id == alice.id
        assert sub.is_active is True
        assert sub.user_agent == "Firefox"

    @pytest.mark.asyncio
    async def test_same_user_refreshes_in_place(self, db, alice):
        _, original = await reconcile_subscription(db, alice.id, payload())
        original.is_active = False

        outcome, sub = await reconcile_subscription(db, alice.id, payload(p256dh="key-2", auth="auth-2"))

        assert outcome == SubscriptionOutcome.REFRESHED
        assert sub.id == original.id
        assert (sub.p256dh, sub.auth) == ("key-2", "auth-2")
        assert sub.is_active is True
        assert len(await rows_for(db)) == 1

    @pytest.mark.asyncio
    async def test_matching_keys_transfer_ownership(self, db, alice, bob):
        _, original = await reconcile_subscription(db, alice.id, payload())

        outcome, sub = await reconcile_subscription(db, bob.id, payload())

        assert outcome == SubscriptionOutcome.REASSIGNED
        assert sub.id == original.id
        assert sub.user_id == bob.id
        assert len(await rows_for(db)) == 1

    @pytest.mark.asyncio
    async def test_different_keys_leave_record_untouched(self, db, alice, bob):
        _, original = await reconcile_subscription(db, alice.id, payload())
        updated_at = original.updated_at

        outcome, sub = await reconcile_subscription(db, bob.id, payload(p256dh="other", auth="other"))

        assert outcome == SubscriptionOutcome.IGNORED
        assert sub is None
        rows = await rows_for(db)
        assert len(rows) == 1
        assert rows[0].user_id == alice.id
        assert (rows[0].p256dh, rows[0].auth) == ("key-1", "auth-1")
        assert rows[0].updated_at == updated_at

    @pytest.mark.asyncio
    async def test_refresh_deactivates_other_owners(self, db, alice, bob):
        # Legacy duplicate rows for one endpoint
        now = datetime.now(timezone.utc)
        for user, key in ((alice, "a"), (bob, "b")):
            db.add(
                PushSubscription(
                    user_id=user.id, endpoint=ENDPOINT, p256dh=key, auth=key,
                    is_active=True, created_at=now, updated_at=now,
                )
            )
        await db.flush()

        await reconcile_subscription(db, alice.id, payload(p256dh="a", auth="a"))

        active = {r.user_id: r.is_active for r in await rows_for(db)}
        assert active == {alice.id: True, bob.id: False}


class TestDeleteAndList:
    @pytest.mark.asyncio
    async def test_delete_only_removes_callers_rows(self, db, alice, bob):
        await reconcile_subscription(db, alice.id, payload())

        assert await delete_subscription(db, bob.id, ENDPOINT) == 0
        assert len(await rows_for(db)) == 1
        assert await delete_subscription(db, alice.id, ENDPOINT) == 1
        assert await rows_for(db) == []

    @pytest.mark.asyncio
    async def test_list_active_only(self, db, alice):
        _, first = await reconcile_subscription(db, alice.id, payload())
        await reconcile_subscription(db, alice.id, payload(endpoint="https://push.example.com/send/device-2"))
        first.is_active = False
        await db.flush()

        listed = await list_active_subscriptions(db, alice.id)
        assert [s.endpoint for s in listed] == ["https://push.example.com/send/device-2"]


# ---------------------------------------------------------------------------
# Delivery
# ---------------------------------------------------------------------------


@pytest.fixture
def vapid(monkeypatch):
    settings = Settings(vapid_private_key="test-private-key", vapid_subject="mailto:test@example.com")
    monkeypatch.setattr(notifications, "get_settings", lambda: settings)
    return settings


class TestNotifyUser:
    @pytest.mark.asyncio
    async def test_requires_vapid_configuration(self, db, alice, monkeypatch):
        monkeypatch.setattr(notifications, "get_settings", lambda: Settings(vapid_private_key=""))
        with pytest.raises(ValidationFailedError):
            await notifications.notify_user(db, alice.id, None, "hello")

    @pytest.mark.asyncio
    async def test_delivers_and_removes_gone_subscriptions(self, db, alice, vapid, monkeypatch):
        gone = "https://push.example.com/send/gone"
        await reconcile_subscription(db, alice.id, payload())
        await reconcile_subscription(db, alice.id, payload(endpoint=gone))
        sent = []

        def fake_send(subscription_info, data):
            if subscription_info["endpoint"] == gone:
                raise WebPushException("Push failed: 410 Gone", response=SimpleNamespace(status_code=410))
            sent.append((subscription_info, data))

        monkeypatch.setattr(notifications, "_send", fake_send)

        deliveries, removed = await notifications.notify_user(db, alice.id, "Rest over", "Next set!")

        assert removed == 1
        assert {d.endpoint: d.success for d in deliveries} == {ENDPOINT: True, gone: False}
        assert sent[0][0]["keys"] == {"p256dh": "key-1", "auth": "auth-1"}
        assert '"title": "Rest over"' in sent[0][1]
        assert [s.endpoint for s in await list_active_subscriptions(db, alice.id)] == [ENDPOINT]

    @pytest.mark.asyncio
    async def test_transient_failure_keeps_subscription(self, db, alice, vapid, monkeypatch):
        await reconcile_subscription(db, alice.id, payload())

        def fake_send(subscription_info, data):
            raise WebPushException("Push failed: 500", response=SimpleNamespace(status_code=500))

        monkeypatch.setattr(notifications, "_send", fake_send)

        deliveries, removed = await notifications.notify_user(db, alice.id, None, "hello")

        assert removed == 0
        assert deliveries[0].success is False
        assert deliveries[0].status_code == 500
        assert len(await rows_for(db)) == 1

    @pytest.mark.asyncio
    async def test_connection_error_reported_and_loop_continues(self, db, alice, vapid, monkeypatch):
        unreachable = "https://push.example.com/send/unreachable"
        await reconcile_subscription(db, alice.id, payload(endpoint=unreachable))
        await reconcile_subscription(db, alice.id, payload())
        sent = []

        def fake_send(subscription_info, data):
            if subscription_info["endpoint"] == unreachable:
                raise requests.ConnectionError("connection refused")
            sent.append(subscription_info["endpoint"])

        monkeypatch.setattr(notifications, "_send", fake_send)

        deliveries, removed = await notifications.notify_user(db, alice.id, None, "hello")

        assert removed == 0
        assert sent == [ENDPOINT]
        failed = next(d for d in deliveries if d.endpoint == unreachable)
        assert failed.success is False
        assert failed.status_code is None
        assert "connection refused" in failed.error
        assert len(await rows_for(db)) == 2


class TestBuildPayload:
    def test_default_title(self):
        assert '"title": "Notification"' in notifications.build_payload(None, "hi")
