"""
TechShirt Backend - Pricing Models
====================================

What:  `designer_pricing` (per-designer service rates) and `print_pricing`
       (rate per print technique).
How:   updated_at stays NULL until the first update, so "never edited" and
       "edited" rows can be told apart.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Float, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import PrintType, UTCDateTime, enum_type, utcnow


class DesignerPricing(Base):
    __tablename__ = "designer_pricing"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    designer_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    normal_amount: Mapped[float] = mapped_column(Float, nullable=False)
    promo_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (Index("idx_designer_pricing_designer_id", "designer_id"),)

    def __repr__(self) -> str:
        return f"<DesignerPricing(id={self.id}, designer_id={self.designer_id})>"


class PrintPricing(Base):
    __tablename__ = "print_pricing"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    print_type: Mapped[PrintType] = mapped_column(enum_type(PrintType), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<PrintPricing(id={self.id}, print_type='{self.print_type.value}')>"
