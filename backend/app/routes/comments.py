"""
TechShirt Backend - Comment Routes
====================================

What:  Preview comment thread endpoints.
Who:   Called by the design preview page (thread under each preview) and the
       user activity view.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.comment import CommentCreate, CommentResponse
from app.schemas.common import CreatedResponse, ErrorResponse
from app.services.comment_service import comment_service

router = APIRouter(prefix="/api", tags=["Comments"])


@router.get(
    "/previews/{preview_id}/comments",
    response_model=List[CommentResponse],
    summary="List comments on a preview",
)
async def list_preview_comments(
    preview_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[CommentResponse]:
    return await comment_service.list_by_preview(db, preview_id)


@router.get(
    "/users/{user_id}/comments",
    response_model=List[CommentResponse],
    summary="List comments written by a user",
)
async def list_user_comments(
    user_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[CommentResponse]:
    return await comment_service.list_by_user(db, user_id)


@router.post(
    "/comments",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Blank comment text", "model": ErrorResponse}},
    summary="Add a comment to a preview",
)
async def add_comment(
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    comment_id = await comment_service.add(db, payload)
    return CreatedResponse(id=comment_id)
