"""
TechShirt Backend - Designer Profile Routes
=============================================

What:  Look up a user's designer record and edit its contact details.
Who:   Designer settings page.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.designer import DesignerProfileUpdate, DesignerResponse
from app.services.designer_service import designer_service

router = APIRouter(prefix="/api", tags=["Designers"])


@router.get(
    "/users/{user_id}/designer",
    response_model=Optional[DesignerResponse],
    summary="Designer record of a user (null if the user is not a designer)",
)
async def get_designer_for_user(
    user_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Optional[DesignerResponse]:
    return await designer_service.get_by_user(db, user_id)


@router.patch(
    "/designers/{designer_id}",
    response_model=DesignerResponse,
    responses={404: {"description": "Designer not found", "model": ErrorResponse}},
    summary="Update a designer's contact number and address",
)
async def update_designer_profile(
    designer_id: UUID,
    payload: DesignerProfileUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> DesignerResponse:
    return await designer_service.update_profile(db, designer_id, payload)
