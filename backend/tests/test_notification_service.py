"""
TechShirt Backend - Notification Service Tests
================================================

What we test:
    ✅ Design update: status → in_progress plus one unread client notification
    ✅ Missing design / missing client: error raised, nothing written
    ✅ A failed flush rolls the status change back and raises DatabaseError
    ✅ Direct notifications require an existing user
    ✅ Bulk notifications report per-recipient outcomes
    ✅ The feed is newest first and scoped to the recipient
"""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError, InvalidStateError, NotFoundError
from app.models import Design, DesignStatus, Notification, UserRole
from app.schemas.notification import (
    BulkNotificationCreate,
    NotificationCreate,
    NotificationRecipient,
)
from app.services.notification_service import NotificationService, design_update_message


async def _notification_count(db) -> int:
    return await db.scalar(select(func.count()).select_from(Notification))


class TestNotifyClientDesignUpdate:

    def setup_method(self):
        self.service = NotificationService()

    @pytest.mark.asyncio
    async def test_success_updates_status_and_notifies_client(self, db, seed):
        client = await seed.user("client_1")
        design = await seed.design(client_id=client.id)

        result = await self.service.notify_client_design_update(db, design.id)

        assert result.success is True
        assert result.design_id == design.id

        refreshed = await db.get(Design, design.id, populate_existing=True)
        assert refreshed.status == DesignStatus.IN_PROGRESS

        rows = (await db.execute(select(Notification))).scalars().all()
        assert len(rows) == 1
        note = rows[0]
        assert note.id == result.notification_id
        assert note.recipient_user_id == client.id
        assert note.recipient_user_type == UserRole.CLIENT
        assert note.is_read is False
        assert str(design.id) in note.content
        assert note.content == design_update_message(design.id)

    @pytest.mark.asyncio
    async def test_missing_design_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            await self.service.notify_client_design_update(db, uuid4())

        assert await _notification_count(db) == 0

    @pytest.mark.asyncio
    async def test_design_without_client_raises_invalid_state(self, db, seed):
        design = await seed.design(client_id=None)

        with pytest.raises(InvalidStateError, match="no associated client"):
            await self.service.notify_client_design_update(db, design.id)

        refreshed = await db.get(Design, design.id, populate_existing=True)
        assert refreshed.status == DesignStatus.PENDING
        assert await _notification_count(db) == 0

    @pytest.mark.asyncio
    async def test_failed_flush_rolls_back_status(self, db, seed):
        client = await seed.user("client_1")
        design = await seed.design(client_id=client.id)
        await seed.commit()
        design_id = design.id

        failing_flush = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk full")))
        with patch.object(db, "flush", failing_flush):
            with pytest.raises(DatabaseError):
                await self.service.notify_client_design_update(db, design_id)

        refreshed = await db.get(Design, design_id, populate_existing=True)
        assert refreshed.status == DesignStatus.PENDING
        assert await _notification_count(db) == 0

    @pytest.mark.asyncio
    async def test_failed_flush_calls_rollback(self, mock_db_session):
        design = MagicMock(spec=Design)
        design.id = uuid4()
        design.client_id = uuid4()
        mock_db_session.get.return_value = design
        mock_db_session.flush.side_effect = OperationalError("INSERT", {}, Exception("boom"))

        with pytest.raises(DatabaseError):
            await self.service.notify_client_design_update(mock_db_session, design.id)

        mock_db_session.rollback.assert_awaited_once()


class TestCreateNotification:

    def setup_method(self):
        self.service = NotificationService()

    @pytest.mark.asyncio
    async def test_creates_unread_notification(self, db, seed):
        user = await seed.user("designer_1", role=UserRole.DESIGNER)

        item = await self.service.create_notification(
            db,
            NotificationCreate(user_id=user.id, user_type=UserRole.DESIGNER, message="New request"),
        )

        assert item.content == "New request"
        assert item.is_read is False
        assert item.recipient_type == UserRole.DESIGNER

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            await self.service.create_notification(
                db,
                NotificationCreate(user_id=uuid4(), user_type=UserRole.CLIENT, message="hi"),
            )
        assert await _notification_count(db) == 0

    @pytest.mark.asyncio
    async def test_bulk_reports_each_recipient(self, db, seed):
        alice = await seed.user("alice")
        bob = await seed.user("bob", role=UserRole.DESIGNER)
        ghost = uuid4()

        result = await self.service.create_notification_for_multiple_users(
            db,
            BulkNotificationCreate(
                recipients=[
                    NotificationRecipient(user_id=alice.id, user_type=UserRole.CLIENT),
                    NotificationRecipient(user_id=ghost, user_type=UserRole.CLIENT),
                    NotificationRecipient(user_id=bob.id, user_type=UserRole.DESIGNER),
                ],
                message="Shop closed on Monday",
            ),
        )

        assert result.success is True
        assert result.total_recipients == 3
        assert result.success_count == 2
        assert result.failure_count == 1
        assert [r.success for r in result.results] == [True, False, True]
        assert result.results[1].user_id == ghost
        assert "not found" in result.results[1].error
        assert await _notification_count(db) == 2


class TestUserNotifications:

    def setup_method(self):
        self.service = NotificationService()

    @pytest.mark.asyncio
    async def test_feed_is_newest_first(self, db, seed):
        user = await seed.user("client_1")
        other = await seed.user("client_2")
        await seed.notification(user.id, "oldest")
        await seed.notification(other.id, "not mine")
        await seed.notification(user.id, "middle")
        await seed.notification(user.id, "newest")

        feed = await self.service.get_user_notifications(db, user.id)

        assert [n.content for n in feed] == ["newest", "middle", "oldest"]
        assert all(n.recipient_type == UserRole.CLIENT for n in feed)

    @pytest.mark.asyncio
    async def test_feed_for_unknown_user_is_empty(self, db):
        assert await self.service.get_user_notifications(db, uuid4()) == []
