"""Rating/feedback contracts."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class RatingCreate(BaseModel):
    portfolio_id: uuid.UUID
    design_id: uuid.UUID
    reviewer_id: uuid.UUID
    rating: float
    feedback: Optional[str] = None


class RatingResponse(BaseModel):
    id: uuid.UUID
    portfolio_id: uuid.UUID
    design_id: uuid.UUID
    reviewer_id: uuid.UUID
    rating: float
    feedback: str
    created_at: datetime

    model_config = {"from_attributes": True}
