"""
TechShirt Backend - File Reference Service
============================================

What:  Resolves opaque storage handles to retrievable URLs (single and
       batch), registers uploads, and locates blobs for serving.
How:   Handles are rows in `stored_files`; a handle resolves to a URL only
       when its row exists AND the blob store still holds the file.
Who:   Called by the file routes; previews and request sketches carry handles.

Null semantics:
    get_url() returns None for an unknown handle or a missing blob. This is
    a normal outcome, passed through to the caller as null.

Batch resolution (get_urls):
    1. One `IN (...)` query fetches every referenced row
    2. Blob presence is checked concurrently (asyncio.gather)
    3. Results are collected by input index, THEN nulls are dropped, so the
       surviving URLs keep the caller's order
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import DatabaseError, NotFoundError
from app.models.stored_file import StoredFile
from app.schemas.file import FileUploadResponse
from app.services.blob_base import BlobStore
from app.services.blob_store import blob_store as default_blob_store

logger = logging.getLogger(__name__)


class FileService:
    """
    Business logic over storage handles.

    The blob store is injected so tests can point it at a temporary root.
    """

    def __init__(self, blob_store: Optional[BlobStore] = None):
        self.blob_store = blob_store or default_blob_store

    def build_url(self, storage_id: str) -> str:
        """Public URL that serves the blob behind a handle."""
        return f"{settings.public_base_url.rstrip('/')}/api/files/{storage_id}"

    async def get_url(self, db: AsyncSession, storage_id: str) -> Optional[str]:
        """URL for one handle, or None when it does not resolve."""
        record = await db.get(StoredFile, storage_id)
        return await self._resolve(record)

    async def get_urls(
        self, db: AsyncSession, storage_ids: Optional[List[str]]
    ) -> List[str]:
        """
        URLs for many handles, in request order, unresolvable ones dropped.

        An absent list yields an empty list.
        """
        if not storage_ids:
            return []

        result = await db.execute(
            select(StoredFile).where(StoredFile.id.in_(set(storage_ids)))
        )
        records: Dict[str, StoredFile] = {r.id: r for r in result.scalars().all()}

        resolved = await asyncio.gather(
            *(self._resolve(records.get(storage_id)) for storage_id in storage_ids)
        )

        urls = [url for url in resolved if url is not None]
        if len(urls) < len(storage_ids):
            logger.debug("Resolved %d of %d storage handles", len(urls), len(storage_ids))
        return urls

    async def upload(
        self,
        db: AsyncSession,
        filename: str,
        content: bytes,
        content_length: Optional[int] = None,
    ) -> FileUploadResponse:
        """
        Store a blob and register its handle.

        Raises:
            ValidationError: rejected by the blob store's checks
            FileStorageError: the blob could not be written
            DatabaseError: the handle could not be registered (blob removed)
        """
        blob = await self.blob_store.put(filename, content, content_length)

        record = StoredFile(
            id=blob.storage_id,
            path=blob.path,
            content_type=blob.content_type,
            size_bytes=blob.size_bytes,
        )
        try:
            db.add(record)
            await db.flush()
        except SQLAlchemyError as e:
            await self.blob_store.remove(blob.path)
            logger.error("Could not register blob %s: %s", blob.storage_id, str(e))
            raise DatabaseError(
                message="Could not save the uploaded file. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Upload registered: %s (%s)", blob.storage_id, blob.content_type)
        return FileUploadResponse(
            storage_id=blob.storage_id,
            content_type=blob.content_type,
            size_bytes=blob.size_bytes,
            url=self.build_url(blob.storage_id),
        )

    async def open_blob(self, db: AsyncSession, storage_id: str) -> Tuple[Path, str]:
        """
        Absolute path and content type for serving a blob.

        Raises:
            NotFoundError: unknown handle or missing blob
        """
        record = await db.get(StoredFile, storage_id)
        if record is None or not await self.blob_store.exists(record.path):
            raise NotFoundError(resource="file", resource_id=storage_id)
        return self.blob_store.resolve_path(record.path), record.content_type

    async def _resolve(self, record: Optional[StoredFile]) -> Optional[str]:
        if record is None:
            return None
        if not await self.blob_store.exists(record.path):
            logger.warning("Storage handle %s has no blob at %s", record.id, record.path)
            return None
        return self.build_url(record.id)


file_service = FileService()
