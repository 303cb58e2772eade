"""Comment request/response contracts."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    preview_id: uuid.UUID
    user_id: uuid.UUID
    comment: str = Field(description="Comment text; must not be blank")


class CommentResponse(BaseModel):
    id: uuid.UUID
    preview_id: uuid.UUID
    user_id: uuid.UUID
    comment: str
    created_at: datetime

    model_config = {"from_attributes": True}
