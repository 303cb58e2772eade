"""Blob handle resolution and upload contracts."""

from typing import List, Optional

from pydantic import BaseModel, Field


class FileUrlResponse(BaseModel):
    storage_id: str
    url: Optional[str] = Field(description="Null when the handle has no retrievable blob")


class FileUrlsRequest(BaseModel):
    storage_ids: Optional[List[str]] = None


class FileUrlsResponse(BaseModel):
    urls: List[str] = Field(description="Resolved URLs in request order, nulls dropped")


class FileUploadResponse(BaseModel):
    storage_id: str
    content_type: str
    size_bytes: int
    url: str
