"""
TechShirt Backend - Inventory Models
======================================

What:  `inventory_categories` and `inventory_items`.
How:   Items point at their category by category_id. Categories can be removed
       out-of-band, so readers must tolerate a dangling category_id.

Stock fields:
    stock:           units on hand, never negative after consume_stock()
    reorder_level:   threshold below which the shop restocks (informational)
    pending_restock: units requested by designs that stock could not cover
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Float, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class InventoryCategory(Base):
    __tablename__ = "inventory_categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    category_name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (Index("idx_inventory_categories_name", "category_name"),)


class InventoryItem(Base):
    __tablename__ = "inventory_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    stock: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    reorder_level: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    pending_restock: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("idx_inventory_items_name", "name"),
        Index("idx_inventory_items_category_id", "category_id"),
    )

    def __repr__(self) -> str:
        return f"<InventoryItem(id={self.id}, name='{self.name}', stock={self.stock})>"
