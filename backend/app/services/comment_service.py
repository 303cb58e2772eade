"""
TechShirt Backend - Comment Service
=====================================

What:  Create and list comments left on design previews.
How:   Single-table reads filtered by preview or author, oldest first;
       inserts stamped with the current UTC time.
Who:   Called by the comment routes.

Comments are immutable: there is no update or delete operation. The preview
and user ids are trusted as given; only the text is checked.
"""

import logging
import uuid
from typing import List

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, ValidationError
from app.models.design import Comment
from app.schemas.comment import CommentCreate, CommentResponse

logger = logging.getLogger(__name__)


class CommentService:
    """Business logic for preview comments."""

    async def list_by_preview(
        self, db: AsyncSession, preview_id: uuid.UUID
    ) -> List[CommentResponse]:
        """All comments on a preview in insertion order; empty list if none."""
        return await self._list(db, Comment.preview_id == preview_id)

    async def list_by_user(
        self, db: AsyncSession, user_id: uuid.UUID
    ) -> List[CommentResponse]:
        """All comments written by a user in insertion order."""
        return await self._list(db, Comment.user_id == user_id)

    async def add(self, db: AsyncSession, payload: CommentCreate) -> uuid.UUID:
        """
        Insert a comment and return its id.

        Raises:
            ValidationError: comment text is empty or whitespace only
        """
        text = payload.comment.strip()
        if not text:
            raise ValidationError(message="Comment text must not be empty", field="comment")

        comment = Comment(
            preview_id=payload.preview_id,
            user_id=payload.user_id,
            comment=text,
        )
        db.add(comment)
        await db.flush()
        logger.info("Comment %s added to preview %s", comment.id, payload.preview_id)
        return comment.id

    async def _list(
        self, db: AsyncSession, condition: ColumnElement[bool]
    ) -> List[CommentResponse]:
        try:
            result = await db.execute(
                select(Comment).where(condition).order_by(Comment.created_at.asc())
            )
        except SQLAlchemyError as e:
            logger.error("Database error listing comments: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve comments. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [CommentResponse.model_validate(c) for c in result.scalars().all()]


comment_service = CommentService()
