"""
TechShirt Backend - Shared Column Types and Enumerations
==========================================================

What:  Column helpers and enum vocabularies shared by every ORM model.
How:   UTCDateTime wraps DateTime(timezone=True) so values always come back
       timezone-aware in UTC, including on SQLite, which stores naive text.
"""

import enum
from datetime import datetime, timezone
from typing import Optional, Type

from sqlalchemy import DateTime, Enum
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    """Current time, timezone-aware UTC. Used for every created/updated stamp."""
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp normalized to UTC on the way in and out."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class UserRole(str, enum.Enum):
    CLIENT = "client"
    DESIGNER = "designer"
    ADMIN = "admin"


class DesignStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    BILLED = "billed"
    APPROVED = "approved"


class PrintType(str, enum.Enum):
    SUBLIMATION = "Sublimation"
    DTF = "Dtf"


def enum_type(enum_cls: Type[enum.Enum], length: int = 20) -> Enum:
    """
    String-backed enum column storing member values ("in_progress"), not names.
    Rendered as a plain VARCHAR on every backend.
    """
    return Enum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=lambda members: [m.value for m in members],
    )
