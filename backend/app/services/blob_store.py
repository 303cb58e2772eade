"""
TechShirt Backend - Local Blob Store
======================================

What:  File-system implementation of BlobStore.
How:   Validates extension, size and MIME type, then writes the blob under a
       date-organized directory with a UUID-derived name using async file I/O.
Who:   FileService, for uploads and for resolving handles to present blobs.

Security Model:
    1. Extension check:   fast first filter
    2. Size check:        Content-Length first, then actual byte count
    3. MIME type check:   libmagic reads the header bytes
    4. Handle filename:   no user input reaches the file system path
    5. Path confinement:  resolve_path() refuses anything outside the root

Directory Structure:
    storage/
    └── 2024/
        └── 01/
            └── 15/
                ├── 9f0c...e1.png
                └── 4ab2...77.jpg
"""

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

import aiofiles
import aiofiles.os

from app.config import settings
from app.exceptions import FileStorageError, ValidationError
from app.services.blob_base import BlobStore, StoredBlob

logger = logging.getLogger(__name__)

# Allowed MIME types and the extension each is stored under
ALLOWED_MIME_TYPES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/webp": ".webp",
}

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp"}

_EXTENSION_MIME = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


class LocalBlobStore(BlobStore):
    """
    Blob store rooted at a local directory.

    Lifecycle of an upload:
        1. validate_extension()  (rejects before reading content)
        2. validate_size()
        3. validate_mime_type()  (magic bytes)
        4. store_file()          (date directory + handle filename)
        5. the caller registers the returned StoredBlob; on failure it calls
           remove() so no orphan file stays behind
    """

    def __init__(self, storage_root: Optional[str] = None, max_file_size: Optional[int] = None):
        """
        Args:
            storage_root: Override the default storage path (used in tests).
            max_file_size: Override settings.max_file_size (used in tests).
        """
        self.storage_root = Path(storage_root or settings.storage_root).resolve()
        self.max_file_size = max_file_size or settings.max_file_size
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("LocalBlobStore initialized with storage_root=%s", self.storage_root)

    # ── Validation ────────────────────────────────────────────────────────

    def validate_extension(self, filename: str) -> str:
        """
        Returns the normalized extension (lowercase with dot).

        Raises:
            ValidationError if the extension is not allowed.
        """
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                message=(
                    f"File type '{ext}' is not supported. "
                    f"Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
                ),
                field="file",
                context={"extension": ext, "allowed": sorted(ALLOWED_EXTENSIONS)},
            )
        return ext

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Checks the reported Content-Length, then the actual byte count.

        Raises:
            ValidationError for empty content or content above the limit.
        """
        max_mb = self.max_file_size / (1024 * 1024)

        if actual_size == 0:
            raise ValidationError(message="Uploaded file is empty.", field="file")

        if content_length and content_length > self.max_file_size:
            raise ValidationError(
                message=f"File size exceeds maximum of {max_mb:.0f}MB. Please upload a smaller file.",
                field="file",
                context={"max_size_mb": max_mb, "reported_size": content_length},
            )

        if actual_size > self.max_file_size:
            raise ValidationError(
                message=f"File size ({actual_size / (1024 * 1024):.1f}MB) exceeds maximum of {max_mb:.0f}MB.",
                field="file",
                context={"max_size_mb": max_mb, "actual_size": actual_size},
            )

    def validate_mime_type(self, file_content: bytes, filename: str) -> str:
        """
        Detects the real MIME type from the content's magic bytes.

        Returns:
            Detected MIME type string (e.g., "image/png")

        Raises:
            ValidationError if the detected type is not allowed.
        """
        try:
            import magic
            mime_type = magic.from_buffer(file_content, mime=True)
        except ImportError:
            # libmagic missing (e.g. slim CI images): trust the extension
            logger.warning(
                "python-magic not available, falling back to extension-based type detection. "
                "Install libmagic for production security."
            )
            ext = Path(filename).suffix.lower()
            mime_type = _EXTENSION_MIME.get(ext, "application/octet-stream")
        except Exception as e:
            logger.error("MIME type detection failed: %s", str(e))
            raise FileStorageError(
                message="Could not verify file type. Please try again.",
                context={"error": str(e)},
            )

        if mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                message=(
                    f"File content type '{mime_type}' is not supported. "
                    f"The file must be a PNG, JPEG or WebP image."
                ),
                field="file",
                context={"detected_mime": mime_type, "allowed": sorted(ALLOWED_MIME_TYPES)},
            )

        return "image/jpeg" if mime_type == "image/jpg" else mime_type

    # ── Storage ───────────────────────────────────────────────────────────

    def _generate_storage_path(self, extension: str) -> Tuple[str, Path, str]:
        """Returns (storage_id, absolute_path, relative_path) for a new blob."""
        storage_id = uuid.uuid4().hex
        date_dir = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        relative_path = f"{date_dir}/{storage_id}{extension}"
        return storage_id, self.storage_root / relative_path, relative_path

    async def store_file(self, content: bytes, extension: str) -> Tuple[str, str]:
        """
        Write validated content to disk.

        Returns:
            (storage_id, relative_path)

        Raises:
            FileStorageError if directory creation or the write fails.
        """
        storage_id, absolute_path, relative_path = self._generate_storage_path(extension)

        try:
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(absolute_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store blob at %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded file. Please try again.",
                context={"path": str(absolute_path), "os_error": str(e)},
            )

        logger.info("Blob stored: %s (%d bytes)", relative_path, len(content))
        return storage_id, relative_path

    async def put(
        self,
        filename: str,
        content: bytes,
        content_length: Optional[int] = None,
    ) -> StoredBlob:
        ext = self.validate_extension(filename)
        self.validate_size(content_length, len(content))
        mime_type = self.validate_mime_type(content, filename)

        storage_id, relative_path = await self.store_file(content, ALLOWED_MIME_TYPES[mime_type])
        return StoredBlob(
            storage_id=storage_id,
            path=relative_path,
            content_type=mime_type,
            size_bytes=len(content),
        )

    def resolve_path(self, path: str) -> Path:
        """
        Raises:
            ValidationError if `path` escapes the storage root.
        """
        full_path = (self.storage_root / path).resolve()
        if not full_path.is_relative_to(self.storage_root):
            raise ValidationError(message="Invalid file path", field="path")
        return full_path

    async def exists(self, path: str) -> bool:
        try:
            full_path = self.resolve_path(path)
        except ValidationError:
            return False
        return await aiofiles.os.path.isfile(full_path)

    async def remove(self, path: str) -> None:
        try:
            full_path = self.resolve_path(path)
            if await aiofiles.os.path.exists(full_path):
                await aiofiles.os.remove(full_path)
                logger.info("Removed blob: %s", path)
            else:
                logger.debug("Remove: blob already gone: %s", path)
        except (OSError, ValidationError) as e:
            logger.warning("Failed to remove blob %s: %s", path, str(e))

    async def health_check(self) -> bool:
        probe = self.storage_root / f".healthcheck-{uuid.uuid4().hex}"
        try:
            async with aiofiles.open(probe, "wb") as f:
                await f.write(b"ok")
            await aiofiles.os.remove(probe)
            return True
        except OSError as e:
            logger.warning("Blob store health check failed: %s", str(e))
            return False


blob_store = LocalBlobStore()
