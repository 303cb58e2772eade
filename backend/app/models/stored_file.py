"""
TechShirt Backend - Stored File (Blob Handle) Model
=====================================================

What:  Registry of blobs held by the local blob store.
How:   The row id is the opaque storage handle handed to clients; `path` is
       relative to STORAGE_ROOT (YYYY/MM/DD/<handle><ext>).
Who:   LocalBlobStore writes rows on upload; FileService reads them to
       resolve handles to URLs.

A row whose file has disappeared from disk resolves to no URL (null), the
same as an unknown handle.
"""

from datetime import datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class StoredFile(Base):
    __tablename__ = "stored_files"

    # uuid4().hex; kept as text so handles stay opaque strings end to end
    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    path: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Relative path from storage root to the blob",
    )
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size_bytes: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<StoredFile(id='{self.id}', path='{self.path}')>"
