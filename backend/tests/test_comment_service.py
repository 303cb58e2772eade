"""
TechShirt Backend - Comment Service Tests
===========================================

What we test:
    ✅ Comments come back in insertion order, per preview and per author
    ✅ Unknown preview / user yields an empty list
    ✅ add() returns the new id, stamps the call time and strips
       surrounding whitespace
    ✅ Blank text is rejected before anything is written
    ✅ Storage failures surface as DatabaseError
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError, ValidationError
from app.models import Comment, UserRole
from app.schemas.comment import CommentCreate
from app.services.comment_service import CommentService


class TestCommentListing:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    async def test_list_by_preview_in_insertion_order(self, db, seed):
        author = await seed.user("user_a")
        design = await seed.design(client_id=author.id)
        preview = await seed.preview(design.id)

        for text in ("first", "second", "third"):
            await self.service.add(
                db, CommentCreate(preview_id=preview.id, user_id=author.id, comment=text)
            )

        comments = await self.service.list_by_preview(db, preview.id)

        assert [c.comment for c in comments] == ["first", "second", "third"]
        assert all(c.preview_id == preview.id for c in comments)

    @pytest.mark.asyncio
    async def test_list_by_preview_only_returns_that_preview(self, db, seed):
        author = await seed.user("user_a")
        design = await seed.design(client_id=author.id)
        p1 = await seed.preview(design.id)
        p2 = await seed.preview(design.id)

        await self.service.add(db, CommentCreate(preview_id=p1.id, user_id=author.id, comment="on p1"))
        await self.service.add(db, CommentCreate(preview_id=p2.id, user_id=author.id, comment="on p2"))

        comments = await self.service.list_by_preview(db, p2.id)

        assert [c.comment for c in comments] == ["on p2"]

    @pytest.mark.asyncio
    async def test_list_by_preview_unknown_is_empty(self, db):
        assert await self.service.list_by_preview(db, uuid4()) == []

    @pytest.mark.asyncio
    async def test_list_by_user(self, db, seed):
        alice = await seed.user("alice")
        bob = await seed.user("bob", role=UserRole.DESIGNER)
        design = await seed.design(client_id=alice.id)
        preview = await seed.preview(design.id)

        await self.service.add(db, CommentCreate(preview_id=preview.id, user_id=alice.id, comment="a1"))
        await self.service.add(db, CommentCreate(preview_id=preview.id, user_id=bob.id, comment="b1"))
        await self.service.add(db, CommentCreate(preview_id=preview.id, user_id=alice.id, comment="a2"))

        comments = await self.service.list_by_user(db, alice.id)

        assert [c.comment for c in comments] == ["a1", "a2"]

    @pytest.mark.asyncio
    async def test_list_wraps_storage_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("db down"))

        with pytest.raises(DatabaseError):
            await self.service.list_by_preview(mock_db_session, uuid4())


class TestCommentAdd:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    async def test_add_returns_id_of_stored_comment(self, db):
        preview_id, user_id = uuid4(), uuid4()
        before = datetime.now(timezone.utc)

        comment_id = await self.service.add(
            db, CommentCreate(preview_id=preview_id, user_id=user_id, comment="  Love the colors  ")
        )

        stored = await db.get(Comment, comment_id)
        assert stored is not None
        assert stored.comment == "Love the colors"
        assert stored.preview_id == preview_id
        assert stored.user_id == user_id
        assert stored.created_at >= before

        listed = await self.service.list_by_preview(db, preview_id)
        assert [(c.id, c.comment) for c in listed] == [(comment_id, "Love the colors")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_add_rejects_blank_text(self, db, text):
        with pytest.raises(ValidationError, match="must not be empty"):
            await self.service.add(
                db, CommentCreate(preview_id=uuid4(), user_id=uuid4(), comment=text)
            )

        count = await db.scalar(select(func.count()).select_from(Comment))
        assert count == 0
