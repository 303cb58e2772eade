"""
TechShirt Backend - User Directory Service Tests
==================================================

What we test:
    ✅ Identity lookup: hit, miss (None), ambiguous (InvalidStateError)
    ✅ Full listing with camelCase keys
    ✅ Designer directory: one entry per designer, first portfolio wins,
       defaults for designers without portfolio data, non-designers excluded
    ✅ Public projection fields
    ✅ Sign-in upsert inserts then patches
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import MultipleResultsFound

from app.exceptions import InvalidStateError
from app.models import UserRole
from app.schemas.user import IdentityUpsert
from app.services.user_service import DEFAULT_SPECIALIZATION, UserService


class TestLookup:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_get_user_by_clerk_id(self, db, seed):
        user = await seed.user("user_2abc", first_name="Ana", last_name="Reyes")

        found = await self.service.get_user_by_clerk_id(db, "user_2abc")

        assert found.id == user.id
        assert found.model_dump(by_alias=True)["firstName"] == "Ana"
        assert found.model_dump(by_alias=True)["clerkId"] == "user_2abc"

    @pytest.mark.asyncio
    async def test_get_user_by_clerk_id_miss_is_none(self, db):
        assert await self.service.get_user_by_clerk_id(db, "nobody") is None

    @pytest.mark.asyncio
    async def test_ambiguous_identity_raises(self, mock_db_session):
        result = MagicMock()
        result.scalar_one_or_none.side_effect = MultipleResultsFound()
        mock_db_session.execute.return_value = result

        with pytest.raises(InvalidStateError):
            await self.service.get_user_by_clerk_id(mock_db_session, "dup")

    @pytest.mark.asyncio
    async def test_list_all_users(self, db, seed):
        await seed.user("a")
        await seed.user("b", role=UserRole.DESIGNER)
        await seed.user("c", role=UserRole.ADMIN)

        users = await self.service.list_all_users(db)

        assert [u.clerk_id for u in users] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_list_all_public_projection(self, db, seed):
        user = await seed.user("a", email="ana@example.com", first_name="Ana", last_name="Reyes")

        [summary] = await self.service.list_all(db)

        assert summary.model_dump(by_alias=True) == {
            "id": user.id,
            "firstName": "Ana",
            "lastName": "Reyes",
            "email": "ana@example.com",
        }


class TestDesignerDirectory:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_first_portfolio_wins(self, db, seed):
        user = await seed.user("designer_1", role=UserRole.DESIGNER)
        designer = await seed.designer(user.id)
        first = await seed.portfolio(designer.id, specialization="Streetwear", skills=["lettering"])
        await seed.portfolio(designer.id, specialization="Sports", skills=["jerseys"])

        [listing] = await self.service.list_designers(db)

        assert listing.id == user.id
        assert listing.specialization == "Streetwear"
        assert listing.skills == ["lettering"]
        assert listing.portfolio_id == first.id

    @pytest.mark.asyncio
    async def test_defaults_and_exclusions(self, db, seed):
        await seed.user("client_1")
        bare = await seed.user("designer_bare", role=UserRole.DESIGNER)
        partial_user = await seed.user("designer_partial", role=UserRole.DESIGNER)
        partial = await seed.designer(partial_user.id)
        portfolio = await seed.portfolio(partial.id, specialization=None, skills=["vector"])

        listings = await self.service.list_designers(db)

        by_clerk = {entry.clerk_id: entry for entry in listings}
        assert set(by_clerk) == {"designer_bare", "designer_partial"}

        assert by_clerk["designer_bare"].id == bare.id
        assert by_clerk["designer_bare"].specialization == DEFAULT_SPECIALIZATION
        assert by_clerk["designer_bare"].skills == []
        assert by_clerk["designer_bare"].portfolio_id is None

        assert by_clerk["designer_partial"].specialization == DEFAULT_SPECIALIZATION
        assert by_clerk["designer_partial"].skills == ["vector"]
        assert by_clerk["designer_partial"].portfolio_id == portfolio.id

    @pytest.mark.asyncio
    async def test_listing_serializes_camel_case(self, db, seed):
        await seed.user("designer_1", role=UserRole.DESIGNER)

        [listing] = await self.service.list_designers(db)

        dumped = listing.model_dump(by_alias=True)
        assert {"portfolioId", "firstName", "lastName", "clerkId", "specialization", "skills"} <= set(dumped)

    @pytest.mark.asyncio
    async def test_no_designers(self, db, seed):
        await seed.user("client_1")
        assert await self.service.list_designers(db) == []


class TestIdentityUpsert:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_insert_then_patch(self, db):
        created = await self.service.upsert_from_identity(
            db,
            IdentityUpsert(clerk_id="user_9", email="old@example.com", first_name="Old"),
        )
        assert created.role == UserRole.CLIENT

        updated = await self.service.upsert_from_identity(
            db,
            IdentityUpsert(
                clerk_id="user_9",
                email="new@example.com",
                first_name="New",
                last_name="Name",
                role=UserRole.DESIGNER,
            ),
        )

        assert updated.id == created.id
        assert updated.email == "new@example.com"
        assert updated.first_name == "New"
        assert updated.role == UserRole.DESIGNER
        assert len(await self.service.list_all_users(db)) == 1

    def test_camel_case_payload_accepted(self):
        payload = IdentityUpsert.model_validate(
            {"clerkId": "user_1", "email": "a@example.com", "firstName": "Ana"}
        )
        assert payload.clerk_id == "user_1"
        assert payload.first_name == "Ana"
