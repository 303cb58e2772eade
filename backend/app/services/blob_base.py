"""
TechShirt Backend - Abstract Blob Store Interface
===================================================

What:  Contract for the store that holds uploaded blobs (design previews,
       sketches, reference images) behind opaque storage handles.
How:   Concrete stores inherit from BlobStore. LocalBlobStore keeps blobs on
       the local file system; an object-storage backend would implement the
       same methods.
Who:   FileService (handle resolution, uploads, serving) and the health route.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class StoredBlob:
    """Result of a successful put(): the new handle and what was written."""

    storage_id: str
    path: str
    content_type: str
    size_bytes: int


class BlobStore(ABC):
    """
    Abstract interface for blob storage.

    Contract:
        - put() validates and writes a blob, returning its new handle
        - exists() never raises for a missing blob; it returns False
        - remove() is best-effort and idempotent
    """

    @abstractmethod
    async def put(
        self,
        filename: str,
        content: bytes,
        content_length: Optional[int] = None,
    ) -> StoredBlob:
        """
        Validate and store a blob.

        Raises:
            ValidationError: unsupported type, empty or oversized content
            FileStorageError: the write itself failed
        """
        ...

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Whether the blob at `path` (relative to the store root) is present."""
        ...

    @abstractmethod
    def resolve_path(self, path: str) -> Path:
        """Absolute location of a stored blob, confined to the store root."""
        ...

    @abstractmethod
    async def remove(self, path: str) -> None:
        """Delete a blob if present. Failures are logged, not raised."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """True when the store accepts writes."""
        ...
