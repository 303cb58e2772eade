"""
TechShirt Backend - Pricing Services (Designer & Print)
=========================================================

What:  CRUD over designer pricing and print pricing records.
How:   Both services share one shape: list, create (server-stamped
       created_at), partial update (existence-checked, stamps updated_at) and
       idempotent delete.
Who:   Called by the pricing routes (admin pricing manager, designer settings).

Existence policy:
    update() on either service raises NotFoundError for an unknown id.
    remove() on an unknown id is a successful no-op.
"""

import logging
import uuid
from typing import Any, Dict, List, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import NotFoundError
from app.models.pricing import DesignerPricing, PrintPricing
from app.models.types import utcnow
from app.schemas.pricing import (
    DesignerPricingCreate,
    DesignerPricingResponse,
    DesignerPricingSummary,
    DesignerPricingUpdate,
    PrintPricingCreate,
    PrintPricingResponse,
    PrintPricingUpdate,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def _patch(
    db: AsyncSession,
    model: Type[ModelT],
    record_id: uuid.UUID,
    updates: Dict[str, Any],
    resource: str,
) -> ModelT:
    """Load, patch and flush one pricing row; stamps updated_at."""
    record = await db.get(model, record_id)
    if record is None:
        raise NotFoundError(resource=resource, resource_id=str(record_id))

    for field, value in updates.items():
        setattr(record, field, value)
    record.updated_at = utcnow()
    await db.flush()
    logger.info("%s %s updated: %s", resource, record_id, sorted(updates))
    return record


async def _remove(
    db: AsyncSession, model: Type[Base], record_id: uuid.UUID, resource: str
) -> None:
    result = await db.execute(delete(model).where(model.id == record_id))
    if result.rowcount:
        logger.info("%s %s deleted", resource, record_id)
    else:
        logger.debug("%s %s already absent; delete is a no-op", resource, record_id)


class DesignerPricingService:
    """Rates a designer charges for their work."""

    RESOURCE = "designer pricing"

    async def get_all(self, db: AsyncSession) -> List[DesignerPricingSummary]:
        result = await db.execute(select(DesignerPricing).order_by(DesignerPricing.created_at))
        return [
            DesignerPricingSummary(
                id=p.id,
                designer_id=p.designer_id,
                normal_amount=p.normal_amount,
                promo_amount=p.promo_amount,
                description=p.description,
            )
            for p in result.scalars().all()
        ]

    async def get_by_designer(
        self, db: AsyncSession, designer_id: uuid.UUID
    ) -> List[DesignerPricingResponse]:
        result = await db.execute(
            select(DesignerPricing)
            .where(DesignerPricing.designer_id == designer_id)
            .order_by(DesignerPricing.created_at)
        )
        return [DesignerPricingResponse.model_validate(p) for p in result.scalars().all()]

    async def create(self, db: AsyncSession, payload: DesignerPricingCreate) -> uuid.UUID:
        pricing = DesignerPricing(**payload.model_dump())
        db.add(pricing)
        await db.flush()
        logger.info("Designer pricing %s created for designer %s", pricing.id, pricing.designer_id)
        return pricing.id

    async def update(
        self, db: AsyncSession, pricing_id: uuid.UUID, payload: DesignerPricingUpdate
    ) -> DesignerPricingResponse:
        """
        Raises:
            NotFoundError: no designer pricing with this id
        """
        record = await _patch(
            db,
            DesignerPricing,
            pricing_id,
            payload.model_dump(exclude_unset=True),
            self.RESOURCE,
        )
        return DesignerPricingResponse.model_validate(record)

    async def remove(self, db: AsyncSession, pricing_id: uuid.UUID) -> None:
        await _remove(db, DesignerPricing, pricing_id, self.RESOURCE)


class PrintPricingService:
    """Rate per print technique (Sublimation, DTF)."""

    RESOURCE = "print pricing"

    async def get_all(self, db: AsyncSession) -> List[PrintPricingResponse]:
        result = await db.execute(select(PrintPricing).order_by(PrintPricing.created_at))
        return [PrintPricingResponse.model_validate(p) for p in result.scalars().all()]

    async def create(self, db: AsyncSession, payload: PrintPricingCreate) -> uuid.UUID:
        pricing = PrintPricing(**payload.model_dump())
        db.add(pricing)
        await db.flush()
        logger.info("Print pricing %s created (%s)", pricing.id, pricing.print_type.value)
        return pricing.id

    async def update(
        self, db: AsyncSession, pricing_id: uuid.UUID, payload: PrintPricingUpdate
    ) -> PrintPricingResponse:
        """
        Patch the supplied fields of a print pricing record.

        Raises:
            NotFoundError: no print pricing with this id
        """
        record = await _patch(
            db,
            PrintPricing,
            pricing_id,
            payload.model_dump(exclude_unset=True, exclude_none=True),
            self.RESOURCE,
        )
        return PrintPricingResponse.model_validate(record)

    async def remove(self, db: AsyncSession, pricing_id: uuid.UUID) -> None:
        await _remove(db, PrintPricing, pricing_id, self.RESOURCE)


designer_pricing_service = DesignerPricingService()
print_pricing_service = PrintPricingService()
