"""Designer profile contracts."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class DesignerResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    contact_number: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class DesignerProfileUpdate(BaseModel):
    """Only the fields present in the body are written."""
    contact_number: Optional[str] = None
    address: Optional[str] = None
