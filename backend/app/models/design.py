"""
TechShirt Backend - Design, Preview, Comment, Notification and Rating Models
==============================================================================

What:  ORM models for the records produced while a design is worked on:
       the design itself, its previews, comments on previews, notifications
       to users, and the ratings clients leave afterwards.
How:   Every foreign key is a plain UUID column; integrity is checked by the
       services that need it (NotificationService checks design and client).
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, Float, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import DesignStatus, UTCDateTime, UserRole, enum_type, utcnow


class Design(Base):
    """
    A design being produced for a client.

    Status flow: pending → in_progress → finished → billed → approved.
    NotificationService moves a design to in_progress when the designer
    pushes an update.
    """

    __tablename__ = "designs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Nullable: legacy designs were created before the client link existed;
    # those cannot be notified on (InvalidStateError)
    client_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    designer_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)

    status: Mapped[DesignStatus] = mapped_column(
        enum_type(DesignStatus),
        nullable=False,
        default=DesignStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<Design(id={self.id}, status='{self.status.value}')>"


class DesignPreview(Base):
    """A rendered preview of a design; comments hang off previews."""

    __tablename__ = "design_previews"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    design_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    storage_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (Index("idx_design_previews_design_id", "design_id"),)


class Comment(Base):
    """Immutable comment left by a user on a design preview."""

    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    preview_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("idx_comments_preview_id", "preview_id", "created_at"),
        Index("idx_comments_user_id", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, preview_id={self.preview_id})>"


class Notification(Base):
    """In-app notification addressed to one user."""

    __tablename__ = "notifications"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    recipient_user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    recipient_user_type: Mapped[UserRole] = mapped_column(enum_type(UserRole), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_notifications_recipient", "recipient_user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Notification(id={self.id}, recipient={self.recipient_user_id}, "
            f"is_read={self.is_read})>"
        )


class RatingFeedback(Base):
    """A client's rating of a finished design, credited to a portfolio."""

    __tablename__ = "ratings_feedback"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    portfolio_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    design_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    reviewer_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    feedback: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (Index("idx_ratings_portfolio_id", "portfolio_id"),)
