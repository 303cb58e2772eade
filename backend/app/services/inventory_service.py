"""
TechShirt Backend - Inventory Service
=======================================

What:  CRUD over inventory items, category listing, the fabric (textile)
       view, and stock consumption for design production.
How:   Item reads are fetch-and-enrich joins: one query for the items, one
       `IN (...)` query for the categories they reference, then an in-memory
       map. A category id that no longer resolves yields "Unknown" instead of
       failing the read.
Who:   Called by the inventory routes (admin inventory page, needed-stock
       widget).
"""

import logging
import uuid
from typing import Dict, Iterable, List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.inventory import InventoryCategory, InventoryItem
from app.models.types import utcnow
from app.schemas.inventory import (
    InventoryCategoryResponse,
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
    StockConsumeResult,
)

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"
TEXTILE_CATEGORY = "fabric"

# Columns an update may set to null; the rest are required
_NULLABLE_FIELDS = {"reorder_level", "pending_restock", "description"}


class InventoryService:
    """
    Business logic for inventory items.

    Existence policy: update and consume_stock raise NotFoundError for an
    unknown id; delete of an unknown id is a no-op.
    """

    async def create_inventory_item(
        self, db: AsyncSession, payload: InventoryItemCreate
    ) -> uuid.UUID:
        now = utcnow()
        item = InventoryItem(**payload.model_dump(), created_at=now, updated_at=now)
        db.add(item)
        await db.flush()
        logger.info("Inventory item %s created (%s)", item.id, item.name)
        return item.id

    async def get_inventory_items(self, db: AsyncSession) -> List[InventoryItemResponse]:
        """Every item, each carrying its category name (or "Unknown")."""
        result = await db.execute(select(InventoryItem).order_by(InventoryItem.created_at))
        items = list(result.scalars().all())
        names = await self._category_names(db, (item.category_id for item in items))
        return [self._enrich(item, names) for item in items]

    async def get_inventory_categories(
        self, db: AsyncSession
    ) -> List[InventoryCategoryResponse]:
        result = await db.execute(
            select(InventoryCategory).order_by(InventoryCategory.category_name)
        )
        return [InventoryCategoryResponse.model_validate(c) for c in result.scalars().all()]

    async def get_textile_items(self, db: AsyncSession) -> List[InventoryItemResponse]:
        """Items whose category is named "fabric" (any case)."""
        items = await self.get_inventory_items(db)
        return [item for item in items if item.category_name.lower() == TEXTILE_CATEGORY]

    async def update_inventory_item(
        self,
        db: AsyncSession,
        item_id: uuid.UUID,
        payload: InventoryItemUpdate,
    ) -> InventoryItemResponse:
        """
        Patch the supplied fields and refresh updated_at.

        Raises:
            NotFoundError: no inventory item with this id
        """
        item = await self._get_item(db, item_id)

        updates = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or field in _NULLABLE_FIELDS
        }
        for field, value in updates.items():
            setattr(item, field, value)
        item.updated_at = utcnow()
        await db.flush()
        logger.info("Inventory item %s updated: %s", item_id, sorted(updates))

        names = await self._category_names(db, [item.category_id])
        return self._enrich(item, names)

    async def delete_inventory_item(self, db: AsyncSession, item_id: uuid.UUID) -> None:
        result = await db.execute(delete(InventoryItem).where(InventoryItem.id == item_id))
        if result.rowcount:
            logger.info("Inventory item %s deleted", item_id)
        else:
            logger.debug("Inventory item %s already absent; delete is a no-op", item_id)

    async def consume_stock(
        self, db: AsyncSession, item_id: uuid.UUID, needed_qty: float
    ) -> StockConsumeResult:
        """
        Take `needed_qty` units out of stock for a design.

        If stock covers the need it is reduced; otherwise stock drops to zero
        and the shortage is added to pending_restock.

        Raises:
            NotFoundError: no inventory item with this id
        """
        item = await self._get_item(db, item_id)

        current_pending = item.pending_restock or 0
        if needed_qty > item.stock:
            shortage = needed_qty - item.stock
            new_stock = 0.0
            new_pending = current_pending + shortage
            logger.warning(
                "Inventory item %s short by %s %s; queued for restock",
                item_id,
                shortage,
                item.unit,
            )
        else:
            new_stock = item.stock - needed_qty
            new_pending = current_pending

        item.stock = new_stock
        item.pending_restock = new_pending
        item.updated_at = utcnow()
        await db.flush()
        return StockConsumeResult(new_stock=new_stock, new_pending=new_pending)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_item(self, db: AsyncSession, item_id: uuid.UUID) -> InventoryItem:
        item = await db.get(InventoryItem, item_id)
        if item is None:
            raise NotFoundError(resource="inventory item", resource_id=str(item_id))
        return item

    async def _category_names(
        self, db: AsyncSession, category_ids: Iterable[uuid.UUID]
    ) -> Dict[uuid.UUID, str]:
        ids = set(category_ids)
        if not ids:
            return {}
        result = await db.execute(
            select(InventoryCategory.id, InventoryCategory.category_name).where(
                InventoryCategory.id.in_(ids)
            )
        )
        return {row.id: row.category_name for row in result}

    @staticmethod
    def _enrich(item: InventoryItem, names: Dict[uuid.UUID, str]) -> InventoryItemResponse:
        return InventoryItemResponse(
            id=item.id,
            name=item.name,
            category_id=item.category_id,
            category_name=names.get(item.category_id, UNKNOWN_CATEGORY),
            unit=item.unit,
            stock=item.stock,
            reorder_level=item.reorder_level,
            pending_restock=item.pending_restock,
            description=item.description,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


inventory_service = InventoryService()
