"""
TechShirt Backend - Shared Pydantic Schemas
=============================================

What:  Response envelopes used by every route module: error body, health
       report, bare success flag, and the camelCase base for reshaped
       projections.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for projections exposed with camelCase keys (designerId, firstName).

    Input accepts both spellings; FastAPI serializes responses by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(BaseModel):
    """Acknowledgement for writes that have nothing else to return."""
    success: bool = Field(default=True)


class CreatedResponse(BaseModel):
    """Id of a record inserted by a create operation."""
    id: uuid.UUID


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "print pricing with ID '...' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    storage: str = Field(description="Blob store: writable, unwritable")
    uptime_seconds: float = Field(description="Seconds since service started")
