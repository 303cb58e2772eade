"""
TechShirt Backend - File Routes
=================================

What:  Storage handle resolution (single and batch), uploads, and blob
       serving.
Who:   Preview gallery and request form (sketch upload); any <img> whose
       src came from a resolved URL points back at GET /api/files/{id}.

Request Flow (upload):
    1. Client sends multipart/form-data with a 'file' field
    2. Content is read into memory (bounded by max_file_size)
    3. FileService validates, stores and registers the blob
    4. 201 with the new storage handle and its URL
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.file import FileUploadResponse, FileUrlResponse, FileUrlsRequest, FileUrlsResponse
from app.services.file_service import file_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/files", tags=["Files"])


@router.get(
    "/{storage_id}/url",
    response_model=FileUrlResponse,
    summary="Resolve a storage handle to a URL (null if it has no blob)",
)
async def get_file_url(
    storage_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> FileUrlResponse:
    url = await file_service.get_url(db, storage_id)
    return FileUrlResponse(storage_id=storage_id, url=url)


@router.post(
    "/urls",
    response_model=FileUrlsResponse,
    summary="Resolve many storage handles",
    description="URLs come back in request order; handles without a blob are left out.",
)
async def get_file_urls(
    payload: FileUrlsRequest,
    db: AsyncSession = Depends(get_db_session),
) -> FileUrlsResponse:
    return FileUrlsResponse(urls=await file_service.get_urls(db, payload.storage_ids))


@router.post(
    "",
    status_code=201,
    response_model=FileUploadResponse,
    responses={400: {"description": "Invalid file type or size", "model": ErrorResponse}},
    summary="Upload an image",
)
async def upload_file(
    file: UploadFile = File(..., description="PNG, JPEG or WebP image"),
    db: AsyncSession = Depends(get_db_session),
) -> FileUploadResponse:
    try:
        content = await file.read()
        logger.info(
            "Received upload: filename=%s, size=%d bytes",
            file.filename or "unknown",
            len(content),
        )
        return await file_service.upload(
            db,
            filename=file.filename or "upload.png",
            content=content,
            content_length=file.size,
        )
    finally:
        await file.close()


@router.get(
    "/{storage_id}",
    response_class=FileResponse,
    responses={404: {"description": "File not found", "model": ErrorResponse}},
    summary="Serve a stored blob",
)
async def serve_file(
    storage_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> FileResponse:
    path, content_type = await file_service.open_blob(db, storage_id)
    # Handles are never reused, so the bytes behind one never change
    return FileResponse(
        path=str(path),
        media_type=content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )
