"""
TechShirt Backend - Inventory Routes
======================================

What:  Inventory item CRUD, category list, the fabric view and stock
       consumption.
Who:   Admin inventory page and the production "needed items" widget.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import CreatedResponse, ErrorResponse, SuccessResponse
from app.schemas.inventory import (
    InventoryCategoryResponse,
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
    StockConsumeRequest,
    StockConsumeResult,
)
from app.services.inventory_service import inventory_service

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])

_NOT_FOUND = {404: {"description": "Inventory item not found", "model": ErrorResponse}}


@router.post(
    "/items",
    status_code=201,
    response_model=CreatedResponse,
    summary="Create an inventory item",
)
async def create_item(
    payload: InventoryItemCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await inventory_service.create_inventory_item(db, payload))


@router.get(
    "/items",
    response_model=List[InventoryItemResponse],
    summary="List inventory items with their category names",
)
async def list_items(
    db: AsyncSession = Depends(get_db_session),
) -> List[InventoryItemResponse]:
    return await inventory_service.get_inventory_items(db)


@router.patch(
    "/items/{item_id}",
    response_model=InventoryItemResponse,
    responses=_NOT_FOUND,
    summary="Update an inventory item",
)
async def update_item(
    item_id: UUID,
    payload: InventoryItemUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> InventoryItemResponse:
    return await inventory_service.update_inventory_item(db, item_id, payload)


@router.delete(
    "/items/{item_id}",
    response_model=SuccessResponse,
    summary="Delete an inventory item",
)
async def delete_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await inventory_service.delete_inventory_item(db, item_id)
    return SuccessResponse()


@router.post(
    "/items/{item_id}/consume",
    response_model=StockConsumeResult,
    responses=_NOT_FOUND,
    summary="Take stock for a design",
    description=(
        "Reduces stock by the needed quantity. When stock cannot cover it, "
        "stock drops to zero and the shortage is queued as pending restock."
    ),
)
async def consume_stock(
    item_id: UUID,
    payload: StockConsumeRequest,
    db: AsyncSession = Depends(get_db_session),
) -> StockConsumeResult:
    return await inventory_service.consume_stock(db, item_id, payload.needed_qty)


@router.get(
    "/categories",
    response_model=List[InventoryCategoryResponse],
    summary="List inventory categories",
)
async def list_categories(
    db: AsyncSession = Depends(get_db_session),
) -> List[InventoryCategoryResponse]:
    return await inventory_service.get_inventory_categories(db)


@router.get(
    "/textiles",
    response_model=List[InventoryItemResponse],
    summary="List fabric items",
)
async def list_textiles(
    db: AsyncSession = Depends(get_db_session),
) -> List[InventoryItemResponse]:
    return await inventory_service.get_textile_items(db)
