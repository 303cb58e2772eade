"""
TechShirt Backend - Ratings Service
=====================================

What:  Records a client's rating and feedback for a finished design.
How:   Single insert into `ratings_feedback`; the rating must fall inside the
       configured bounds (RATING_MIN..RATING_MAX, default 1..5).
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import ValidationError
from app.models.design import RatingFeedback
from app.schemas.rating import RatingCreate, RatingResponse

logger = logging.getLogger(__name__)


class RatingService:

    async def add_rating(self, db: AsyncSession, payload: RatingCreate) -> RatingResponse:
        """
        Insert one rating. Missing feedback is stored as an empty string.

        Raises:
            ValidationError: rating outside [rating_min, rating_max]
        """
        if not settings.rating_min <= payload.rating <= settings.rating_max:
            raise ValidationError(
                message=(
                    f"Rating must be between {settings.rating_min} and {settings.rating_max}"
                ),
                field="rating",
                context={"rating": payload.rating},
            )

        rating = RatingFeedback(
            portfolio_id=payload.portfolio_id,
            design_id=payload.design_id,
            reviewer_id=payload.reviewer_id,
            rating=payload.rating,
            feedback=payload.feedback or "",
        )
        db.add(rating)
        await db.flush()
        logger.info(
            "Rating %s (%s) added for portfolio %s by %s",
            rating.id,
            rating.rating,
            rating.portfolio_id,
            rating.reviewer_id,
        )
        return RatingResponse.model_validate(rating)


rating_service = RatingService()
