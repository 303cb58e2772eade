"""
TechShirt Backend - Inventory Schemas
=======================================

What:  Contracts for inventory items, categories and stock consumption.

InventoryItemResponse carries the denormalized category name under the
`categoryName` key; it is "Unknown" when the category no longer exists.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InventoryItemCreate(BaseModel):
    name: str = Field(min_length=1)
    category_id: uuid.UUID
    unit: str = Field(min_length=1)
    stock: float = Field(ge=0)
    reorder_level: Optional[float] = Field(default=None, ge=0)
    pending_restock: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None


class InventoryItemUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    category_id: Optional[uuid.UUID] = None
    unit: Optional[str] = Field(default=None, min_length=1)
    stock: Optional[float] = Field(default=None, ge=0)
    reorder_level: Optional[float] = Field(default=None, ge=0)
    pending_restock: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None


class InventoryItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    name: str
    category_id: uuid.UUID
    category_name: str = Field(alias="categoryName")
    unit: str
    stock: float
    reorder_level: Optional[float] = None
    pending_restock: Optional[float] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class InventoryCategoryResponse(BaseModel):
    id: uuid.UUID
    category_name: str
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class StockConsumeRequest(BaseModel):
    needed_qty: float = Field(gt=0, description="Units a design needs from this item")


class StockConsumeResult(BaseModel):
    new_stock: float
    new_pending: float
