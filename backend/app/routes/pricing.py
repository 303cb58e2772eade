"""
TechShirt Backend - Pricing Routes
====================================

What:  Designer pricing and print pricing CRUD.
Who:   Admin pricing page, designer profile page, order summary.

Update semantics:
    PATCH bodies are partial. Designer pricing treats an explicit null on an
    optional field as "clear it"; print pricing ignores nulls. Both answer 404
    for an unknown id. DELETE of an unknown id still answers success.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import CreatedResponse, ErrorResponse, SuccessResponse
from app.schemas.pricing import (
    DesignerPricingCreate,
    DesignerPricingResponse,
    DesignerPricingSummary,
    DesignerPricingUpdate,
    PrintPricingCreate,
    PrintPricingResponse,
    PrintPricingUpdate,
)
from app.services.pricing_service import designer_pricing_service, print_pricing_service

router = APIRouter(prefix="/api", tags=["Pricing"])

_NOT_FOUND = {404: {"description": "Pricing record not found", "model": ErrorResponse}}


# ── Designer Pricing ──────────────────────────────────────────────────────

@router.get(
    "/designer-pricing",
    response_model=List[DesignerPricingSummary],
    summary="List every designer pricing record",
)
async def list_designer_pricing(
    db: AsyncSession = Depends(get_db_session),
) -> List[DesignerPricingSummary]:
    return await designer_pricing_service.get_all(db)


@router.get(
    "/designers/{designer_id}/pricing",
    response_model=List[DesignerPricingResponse],
    summary="Pricing records of one designer",
)
async def list_pricing_for_designer(
    designer_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[DesignerPricingResponse]:
    return await designer_pricing_service.get_by_designer(db, designer_id)


@router.post(
    "/designer-pricing",
    status_code=201,
    response_model=CreatedResponse,
    summary="Create a designer pricing record",
)
async def create_designer_pricing(
    payload: DesignerPricingCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await designer_pricing_service.create(db, payload))


@router.patch(
    "/designer-pricing/{pricing_id}",
    response_model=DesignerPricingResponse,
    responses=_NOT_FOUND,
    summary="Update a designer pricing record",
)
async def update_designer_pricing(
    pricing_id: UUID,
    payload: DesignerPricingUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> DesignerPricingResponse:
    return await designer_pricing_service.update(db, pricing_id, payload)


@router.delete(
    "/designer-pricing/{pricing_id}",
    response_model=SuccessResponse,
    summary="Delete a designer pricing record",
)
async def delete_designer_pricing(
    pricing_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await designer_pricing_service.remove(db, pricing_id)
    return SuccessResponse()


# ── Print Pricing ─────────────────────────────────────────────────────────

@router.get(
    "/print-pricing",
    response_model=List[PrintPricingResponse],
    summary="List print pricing records",
)
async def list_print_pricing(
    db: AsyncSession = Depends(get_db_session),
) -> List[PrintPricingResponse]:
    return await print_pricing_service.get_all(db)


@router.post(
    "/print-pricing",
    status_code=201,
    response_model=CreatedResponse,
    summary="Create a print pricing record",
)
async def create_print_pricing(
    payload: PrintPricingCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await print_pricing_service.create(db, payload))


@router.patch(
    "/print-pricing/{pricing_id}",
    response_model=PrintPricingResponse,
    responses=_NOT_FOUND,
    summary="Update a print pricing record",
)
async def update_print_pricing(
    pricing_id: UUID,
    payload: PrintPricingUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> PrintPricingResponse:
    return await print_pricing_service.update(db, pricing_id, payload)


@router.delete(
    "/print-pricing/{pricing_id}",
    response_model=SuccessResponse,
    summary="Delete a print pricing record",
)
async def delete_print_pricing(
    pricing_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await print_pricing_service.remove(db, pricing_id)
    return SuccessResponse()
