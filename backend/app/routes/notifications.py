"""
TechShirt Backend - Notification Routes
=========================================

What:  Design-update trigger, direct and bulk notification creation, and the
       per-user notification feed.
Who:   Designer workspace ("send update" button), admin broadcast form, and
       the notification bell in the header.

Error mapping for the design-update trigger:
    404  design does not exist
    409  design has no client to notify
    500  the status change and notification could not be saved together
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.notification import (
    BulkNotificationCreate,
    BulkNotificationResult,
    DesignUpdateResult,
    NotificationCreate,
    NotificationItem,
)
from app.services.notification_service import notification_service

router = APIRouter(prefix="/api", tags=["Notifications"])


@router.post(
    "/designs/{design_id}/notify-update",
    response_model=DesignUpdateResult,
    responses={
        404: {"description": "Design not found", "model": ErrorResponse},
        409: {"description": "Design has no client", "model": ErrorResponse},
        500: {"description": "Nothing was written", "model": ErrorResponse},
    },
    summary="Mark a design in progress and notify its client",
)
async def notify_design_update(
    design_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> DesignUpdateResult:
    return await notification_service.notify_client_design_update(db, design_id)


@router.post(
    "/notifications",
    status_code=201,
    response_model=NotificationItem,
    responses={404: {"description": "Recipient not found", "model": ErrorResponse}},
    summary="Notify one user",
)
async def create_notification(
    payload: NotificationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NotificationItem:
    return await notification_service.create_notification(db, payload)


@router.post(
    "/notifications/bulk",
    response_model=BulkNotificationResult,
    summary="Notify several users",
    description=(
        "Sends the same message to every recipient. Unknown recipients are "
        "reported as failed outcomes without stopping the rest."
    ),
)
async def create_notifications_bulk(
    payload: BulkNotificationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> BulkNotificationResult:
    return await notification_service.create_notification_for_multiple_users(db, payload)


@router.get(
    "/users/{user_id}/notifications",
    response_model=List[NotificationItem],
    summary="Notification feed for a user, newest first",
)
async def list_user_notifications(
    user_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[NotificationItem]:
    return await notification_service.get_user_notifications(db, user_id)
