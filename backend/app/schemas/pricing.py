"""
TechShirt Backend - Pricing Schemas
=====================================

What:  Contracts for designer pricing and print pricing.

Designer pricing is listed through DesignerPricingSummary, a camelCase
projection (designerId, normalAmount, promoAmount) whose keys do not follow
the column names. Every other pricing response mirrors its columns.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.types import PrintType
from app.schemas.common import CamelModel


# ── Designer Pricing ──────────────────────────────────────────────────────

class DesignerPricingCreate(BaseModel):
    designer_id: uuid.UUID
    normal_amount: float = Field(ge=0)
    promo_amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None


class DesignerPricingUpdate(BaseModel):
    """Partial update; fields left out of the request body are untouched."""
    normal_amount: Optional[float] = Field(default=None, ge=0)
    promo_amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None

    @field_validator("normal_amount")
    @classmethod
    def normal_amount_not_null(cls, v: Optional[float]) -> float:
        """An explicit null would clear a required column; omit the field instead."""
        if v is None:
            raise ValueError("normal_amount cannot be null")
        return v


class DesignerPricingResponse(BaseModel):
    id: uuid.UUID
    designer_id: uuid.UUID
    normal_amount: float
    promo_amount: Optional[float] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class DesignerPricingSummary(CamelModel):
    id: uuid.UUID
    designer_id: uuid.UUID
    normal_amount: float
    promo_amount: Optional[float] = None
    description: Optional[str] = None


# ── Print Pricing ─────────────────────────────────────────────────────────

class PrintPricingCreate(BaseModel):
    print_type: PrintType
    amount: float = Field(ge=0)
    description: Optional[str] = None


class PrintPricingUpdate(BaseModel):
    """Partial update; null and missing fields both leave the column as is."""
    print_type: Optional[PrintType] = None
    amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None


class PrintPricingResponse(BaseModel):
    id: uuid.UUID
    print_type: PrintType
    amount: float
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
