"""
TechShirt Backend - Designer Profile Service Tests
====================================================
"""

from uuid import uuid4

import pytest

from app.exceptions import NotFoundError
from app.models import UserRole
from app.schemas.designer import DesignerProfileUpdate
from app.services.designer_service import DesignerService


class TestDesignerProfile:

    def setup_method(self):
        self.service = DesignerService()

    @pytest.mark.asyncio
    async def test_get_by_user_returns_first_record(self, db, seed):
        user = await seed.user("designer_1", role=UserRole.DESIGNER)
        first = await seed.designer(user.id, contact_number="0917")
        await seed.designer(user.id, contact_number="0999")

        designer = await self.service.get_by_user(db, user.id)

        assert designer.id == first.id
        assert designer.contact_number == "0917"

    @pytest.mark.asyncio
    async def test_get_by_user_without_designer_is_none(self, db, seed):
        user = await seed.user("client_1")

        assert await self.service.get_by_user(db, user.id) is None

    @pytest.mark.asyncio
    async def test_update_profile_writes_supplied_fields(self, db, seed):
        user = await seed.user("designer_1", role=UserRole.DESIGNER)
        designer = await seed.designer(user.id, contact_number="0917", address="Old street", bio="Hi")

        updated = await self.service.update_profile(
            db, designer.id, DesignerProfileUpdate(address="New street")
        )

        assert updated.address == "New street"
        assert updated.contact_number == "0917"
        assert updated.bio == "Hi"

    @pytest.mark.asyncio
    async def test_update_profile_ignores_nulls(self, db, seed):
        user = await seed.user("designer_1", role=UserRole.DESIGNER)
        designer = await seed.designer(user.id, contact_number="0917", address="Street")

        updated = await self.service.update_profile(
            db, designer.id, DesignerProfileUpdate(contact_number=None, address=None)
        )

        assert updated.contact_number == "0917"
        assert updated.address == "Street"

    @pytest.mark.asyncio
    async def test_update_unknown_designer_raises(self, db):
        with pytest.raises(NotFoundError, match="designer"):
            await self.service.update_profile(db, uuid4(), DesignerProfileUpdate(address="x"))
