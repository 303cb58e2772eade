"""
TechShirt Backend - User Directory Schemas
============================================

What:  User records as exposed to the frontend (camelCase keys, matching the
       identity provider's profile fields), the designer directory listing,
       and the minimal public projection.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from app.models.types import UserRole
from app.schemas.common import CamelModel


class UserResponse(CamelModel):
    id: uuid.UUID
    clerk_id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    created_at: datetime


class DesignerListing(UserResponse):
    """A designer-role user merged with the first matching portfolio's data."""
    specialization: str = "General"
    skills: List[str] = Field(default_factory=list)
    portfolio_id: Optional[uuid.UUID] = None


class UserSummary(CamelModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str


class IdentityUpsert(CamelModel):
    """Profile pushed by the identity provider on sign-in."""
    clerk_id: str = Field(min_length=1)
    email: EmailStr
    first_name: str = ""
    last_name: str = ""
    role: UserRole = UserRole.CLIENT
