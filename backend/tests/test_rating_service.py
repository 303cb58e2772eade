"""
TechShirt Backend - Ratings Service Tests
===========================================
"""

from uuid import uuid4

import pytest

from app.exceptions import ValidationError
from app.models import RatingFeedback
from app.schemas.rating import RatingCreate
from app.services.rating_service import RatingService


def _rating(value: float, feedback=None) -> RatingCreate:
    return RatingCreate(
        portfolio_id=uuid4(),
        design_id=uuid4(),
        reviewer_id=uuid4(),
        rating=value,
        feedback=feedback,
    )


class TestAddRating:

    def setup_method(self):
        self.service = RatingService()

    @pytest.mark.asyncio
    async def test_add_rating_stores_record(self, db):
        payload = _rating(4.5, feedback="Great lettering")

        result = await self.service.add_rating(db, payload)

        stored = await db.get(RatingFeedback, result.id)
        assert stored.rating == 4.5
        assert stored.feedback == "Great lettering"
        assert stored.portfolio_id == payload.portfolio_id
        assert result.created_at is not None

    @pytest.mark.asyncio
    async def test_missing_feedback_defaults_to_empty(self, db):
        result = await self.service.add_rating(db, _rating(5))

        assert result.feedback == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [1, 5])
    async def test_bounds_are_inclusive(self, db, value):
        result = await self.service.add_rating(db, _rating(value))
        assert result.rating == value

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [0, 0.5, 5.5, 6, -1])
    async def test_out_of_range_rejected(self, db, value):
        with pytest.raises(ValidationError, match="between 1 and 5"):
            await self.service.add_rating(db, _rating(value))
