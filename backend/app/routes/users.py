"""
TechShirt Backend - User Directory Routes
===========================================

What:  Identity lookup, user listings, the designer directory and the
       sign-in upsert.
Who:   Session bootstrap (by-clerk lookup, identity upsert), admin users
       page, designer picker in the request form.

All user payloads use camelCase keys (clerkId, firstName, lastName,
portfolioId).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.user import DesignerListing, IdentityUpsert, UserResponse, UserSummary
from app.services.user_service import user_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get(
    "/by-clerk/{clerk_id}",
    response_model=Optional[UserResponse],
    responses={409: {"description": "Identity linked to several users", "model": ErrorResponse}},
    summary="Find a user by external identity id (null if none)",
)
async def get_user_by_clerk_id(
    clerk_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Optional[UserResponse]:
    return await user_service.get_user_by_clerk_id(db, clerk_id)


@router.get("", response_model=List[UserResponse], summary="List all users")
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_all_users(db)


@router.get(
    "/designers",
    response_model=List[DesignerListing],
    summary="Designer directory",
    description=(
        "Every designer-role user with the specialization, skills and id of "
        "their first portfolio. Designers without one get 'General' and no skills."
    ),
)
async def list_designers(db: AsyncSession = Depends(get_db_session)) -> List[DesignerListing]:
    return await user_service.list_designers(db)


@router.get("/public", response_model=List[UserSummary], summary="Public user list")
async def list_public_users(db: AsyncSession = Depends(get_db_session)) -> List[UserSummary]:
    return await user_service.list_all(db)


@router.put(
    "/identity",
    response_model=UserResponse,
    summary="Create or refresh the user behind an external identity",
)
async def upsert_identity(
    payload: IdentityUpsert,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.upsert_from_identity(db, payload)
