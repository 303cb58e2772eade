"""
TechShirt Backend - Notification Service
==========================================

What:  Design-update trigger plus general notification creation and the
       per-user notification feed.
How:   Writes go through the request's AsyncSession and are flushed, never
       committed here; get_db_session commits once the route returns.
Who:   Called by the notification and design routes.

Design-update trigger (notify_client_design_update):
    ┌────────────┐   ┌──────────────┐   ┌─────────────────────┐
    │ load design│──▶│ check client │──▶│ patch status +      │
    │ (NotFound) │   │ (InvalidState│   │ insert notification │
    └────────────┘   └──────────────┘   │ (one flush)         │
                                        └─────────────────────┘
    Both checks run before any write. The status patch and the notification
    insert are flushed together; if that flush fails the session is rolled
    back, undoing the status patch, and DatabaseError is raised.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, InvalidStateError, NotFoundError
from app.models.design import Design, Notification
from app.models.types import DesignStatus, UserRole
from app.models.user import User
from app.schemas.notification import (
    BulkNotificationCreate,
    BulkNotificationResult,
    DesignUpdateResult,
    NotificationCreate,
    NotificationItem,
    RecipientOutcome,
)

logger = logging.getLogger(__name__)


def design_update_message(design_id: uuid.UUID) -> str:
    """Notification body sent to a client when their design changes."""
    return f'Your design "{design_id}" has a new update from the designer.'


class NotificationService:
    """
    Business logic for notifications.

    Responsibilities:
        - notify_client_design_update(): status transition + client notice
        - create_notification(): single notice to an existing user
        - create_notification_for_multiple_users(): fan-out with per-recipient outcome
        - get_user_notifications(): newest-first feed
    """

    async def notify_client_design_update(
        self, db: AsyncSession, design_id: uuid.UUID
    ) -> DesignUpdateResult:
        """
        Move a design to in_progress and notify its client.

        Raises:
            NotFoundError: design does not exist (no writes performed)
            InvalidStateError: design has no client (no writes performed)
            DatabaseError: the combined flush failed (session rolled back)
        """
        design = await db.get(Design, design_id)
        if design is None:
            raise NotFoundError(resource="design", resource_id=str(design_id))

        if design.client_id is None:
            raise InvalidStateError(
                message="Design has no associated client",
                context={"design_id": str(design_id)},
            )

        notification = Notification(
            recipient_user_id=design.client_id,
            recipient_user_type=UserRole.CLIENT,
            content=design_update_message(design.id),
            is_read=False,
        )

        try:
            design.status = DesignStatus.IN_PROGRESS
            db.add(notification)
            await db.flush()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(
                "Design update notification failed for %s, status change rolled back: %s",
                design_id,
                str(e),
            )
            raise DatabaseError(
                message="Could not record the design update. Please try again.",
                context={"design_id": str(design_id), "error_type": type(e).__name__},
            )

        logger.info(
            "Design %s moved to in_progress; notification %s sent to client %s",
            design_id,
            notification.id,
            design.client_id,
        )
        return DesignUpdateResult(design_id=design.id, notification_id=notification.id)

    async def create_notification(
        self, db: AsyncSession, payload: NotificationCreate
    ) -> NotificationItem:
        """
        Insert an unread notification for an existing user.

        Raises:
            NotFoundError: the recipient user does not exist
        """
        user = await db.get(User, payload.user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=str(payload.user_id))

        notification = Notification(
            recipient_user_id=user.id,
            recipient_user_type=payload.user_type,
            content=payload.message,
            is_read=False,
        )
        db.add(notification)
        await db.flush()
        logger.info("Notification %s created for user %s", notification.id, user.id)
        return self._to_item(notification)

    async def create_notification_for_multiple_users(
        self, db: AsyncSession, payload: BulkNotificationCreate
    ) -> BulkNotificationResult:
        """
        Send the same message to several users.

        A missing recipient is recorded as a failed outcome and does not stop
        the others. Storage failures still abort the whole batch.
        """
        results: List[RecipientOutcome] = []

        for recipient in payload.recipients:
            try:
                item = await self.create_notification(
                    db,
                    NotificationCreate(
                        user_id=recipient.user_id,
                        user_type=recipient.user_type,
                        message=payload.message,
                    ),
                )
            except NotFoundError as e:
                logger.warning("Skipping notification for %s: %s", recipient.user_id, e.message)
                results.append(
                    RecipientOutcome(
                        user_id=recipient.user_id,
                        user_type=recipient.user_type,
                        success=False,
                        error=e.message,
                    )
                )
                continue

            results.append(
                RecipientOutcome(
                    user_id=recipient.user_id,
                    user_type=recipient.user_type,
                    success=True,
                    notification_id=item.id,
                )
            )

        success_count = sum(1 for r in results if r.success)
        return BulkNotificationResult(
            total_recipients=len(payload.recipients),
            success_count=success_count,
            failure_count=len(results) - success_count,
            results=results,
        )

    async def get_user_notifications(
        self, db: AsyncSession, user_id: uuid.UUID
    ) -> List[NotificationItem]:
        """Notifications addressed to a user, newest first."""
        try:
            result = await db.execute(
                select(Notification)
                .where(Notification.recipient_user_id == user_id)
                .order_by(Notification.created_at.desc())
            )
        except SQLAlchemyError as e:
            logger.error("Database error fetching notifications for %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not retrieve notifications. Please try again.",
                context={"user_id": str(user_id)},
            )
        return [self._to_item(n) for n in result.scalars().all()]

    @staticmethod
    def _to_item(notification: Notification) -> NotificationItem:
        return NotificationItem(
            id=notification.id,
            content=notification.content,
            created_at=notification.created_at,
            is_read=bool(notification.is_read),
            recipient_type=notification.recipient_user_type,
        )


notification_service = NotificationService()
