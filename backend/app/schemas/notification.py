"""
TechShirt Backend - Notification Schemas
==========================================

What:  Contracts for the design-update trigger, single and bulk notification
       creation, and the per-user notification feed.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.types import UserRole


class DesignUpdateResult(BaseModel):
    """Returned by the design-update trigger once both writes are flushed."""
    success: bool = True
    design_id: uuid.UUID
    notification_id: uuid.UUID


class NotificationCreate(BaseModel):
    user_id: uuid.UUID
    user_type: UserRole
    message: str = Field(min_length=1)


class NotificationRecipient(BaseModel):
    user_id: uuid.UUID
    user_type: UserRole


class BulkNotificationCreate(BaseModel):
    recipients: List[NotificationRecipient]
    message: str = Field(min_length=1)


class RecipientOutcome(BaseModel):
    user_id: uuid.UUID
    user_type: UserRole
    success: bool
    notification_id: Optional[uuid.UUID] = None
    error: Optional[str] = None


class BulkNotificationResult(BaseModel):
    """
    Per-recipient outcomes. `success` is true whenever the batch itself ran;
    individual failures are counted in failure_count.
    """
    success: bool = True
    total_recipients: int
    success_count: int
    failure_count: int
    results: List[RecipientOutcome]


class NotificationItem(BaseModel):
    """Feed projection of a notification record."""
    id: uuid.UUID
    content: str
    created_at: datetime
    is_read: bool
    recipient_type: UserRole
