"""
TechShirt Backend - Inventory Service Tests
=============================================

What we test:
    ✅ create stamps created_at == updated_at
    ✅ Listing resolves category names, "Unknown" for dangling ids
    ✅ Textile view matches "fabric" case-insensitively
    ✅ Update patches fields, refreshes updated_at, 404s on unknown ids
    ✅ Delete is idempotent
    ✅ Stock consumption with and without a shortage
"""

from uuid import uuid4

import pytest

from app.exceptions import NotFoundError
from app.models import InventoryItem
from app.schemas.inventory import InventoryItemCreate, InventoryItemUpdate
from app.services.inventory_service import UNKNOWN_CATEGORY, InventoryService


class TestInventoryItems:

    def setup_method(self):
        self.service = InventoryService()

    @pytest.mark.asyncio
    async def test_create_sets_matching_timestamps(self, db, seed):
        category = await seed.category("Ink")

        item_id = await self.service.create_inventory_item(
            db,
            InventoryItemCreate(name="Black ink", category_id=category.id, unit="ml", stock=500),
        )

        item = await db.get(InventoryItem, item_id)
        assert item.name == "Black ink"
        assert item.created_at == item.updated_at

    @pytest.mark.asyncio
    async def test_list_resolves_category_names(self, db, seed):
        ink = await seed.category("Ink")
        await seed.item("Black ink", ink.id)
        await seed.item("Orphan", uuid4())

        items = await self.service.get_inventory_items(db)

        names = {i.name: i.category_name for i in items}
        assert names == {"Black ink": "Ink", "Orphan": UNKNOWN_CATEGORY}

    @pytest.mark.asyncio
    async def test_response_uses_category_name_alias(self, db, seed):
        ink = await seed.category("Ink")
        await seed.item("Black ink", ink.id)

        [item] = await self.service.get_inventory_items(db)

        dumped = item.model_dump(by_alias=True)
        assert dumped["categoryName"] == "Ink"
        assert "category_name" not in dumped

    @pytest.mark.asyncio
    async def test_categories(self, db, seed):
        await seed.category("Ink")
        await seed.category("Fabric")

        categories = await self.service.get_inventory_categories(db)

        assert [c.category_name for c in categories] == ["Fabric", "Ink"]

    @pytest.mark.asyncio
    async def test_textile_items_match_fabric_case_insensitive(self, db, seed):
        fabric = await seed.category("FABRIC")
        ink = await seed.category("Ink")
        await seed.item("Cotton", fabric.id)
        await seed.item("Black ink", ink.id)

        textiles = await self.service.get_textile_items(db)

        assert [t.name for t in textiles] == ["Cotton"]

    @pytest.mark.asyncio
    async def test_update_patches_and_refreshes_updated_at(self, db, seed):
        ink = await seed.category("Ink")
        item = await seed.item("Black ink", ink.id, stock=10)
        before = item.updated_at

        updated = await self.service.update_inventory_item(
            db, item.id, InventoryItemUpdate(stock=25, description="restocked")
        )

        assert updated.stock == 25
        assert updated.description == "restocked"
        assert updated.name == "Black ink"
        assert updated.category_name == "Ink"
        assert updated.updated_at > before
        assert updated.created_at == before

    @pytest.mark.asyncio
    async def test_update_unknown_raises(self, db):
        with pytest.raises(NotFoundError, match="inventory item"):
            await self.service.update_inventory_item(db, uuid4(), InventoryItemUpdate(stock=1))

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, db, seed):
        ink = await seed.category("Ink")
        item = await seed.item("Black ink", ink.id)

        await self.service.delete_inventory_item(db, item.id)
        await self.service.delete_inventory_item(db, item.id)

        assert await self.service.get_inventory_items(db) == []


class TestConsumeStock:

    def setup_method(self):
        self.service = InventoryService()

    @pytest.mark.asyncio
    async def test_consume_within_stock(self, db, seed):
        fabric = await seed.category("Fabric")
        item = await seed.item("Cotton", fabric.id, stock=10)

        result = await self.service.consume_stock(db, item.id, 4)

        assert result.new_stock == 6
        assert result.new_pending == 0

    @pytest.mark.asyncio
    async def test_consume_beyond_stock_queues_shortage(self, db, seed):
        fabric = await seed.category("Fabric")
        item = await seed.item("Cotton", fabric.id, stock=3, pending_restock=2)

        result = await self.service.consume_stock(db, item.id, 8)

        assert result.new_stock == 0
        assert result.new_pending == 7
        stored = await db.get(InventoryItem, item.id)
        assert stored.stock == 0
        assert stored.pending_restock == 7

    @pytest.mark.asyncio
    async def test_consume_unknown_item_raises(self, db):
        with pytest.raises(NotFoundError):
            await self.service.consume_stock(db, uuid4(), 1)
