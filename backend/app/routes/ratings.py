"""
TechShirt Backend - Ratings Routes
====================================

What:  Client rating and feedback submission for a finished design.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.rating import RatingCreate, RatingResponse
from app.services.rating_service import rating_service

router = APIRouter(prefix="/api", tags=["Ratings"])


@router.post(
    "/ratings",
    status_code=201,
    response_model=RatingResponse,
    responses={400: {"description": "Rating out of range", "model": ErrorResponse}},
    summary="Rate a designer's portfolio for a design",
)
async def add_rating(
    payload: RatingCreate,
    db: AsyncSession = Depends(get_db_session),
) -> RatingResponse:
    return await rating_service.add_rating(db, payload)
