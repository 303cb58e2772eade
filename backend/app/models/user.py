"""
TechShirt Backend - User, Designer and Portfolio Models
=========================================================

What:  ORM models for the `users`, `designers` and `portfolios` tables.
How:   Flat records linked by plain id columns (user_id, designer_id); no ORM
       relationships are declared, joins are done explicitly by the services.
Who:   UserService (directory and designer listing) and DesignerService
       (profile lookup and patch).

Lifecycle:
    - User: inserted (or patched) on every external-identity sign-in.
    - Designer: provisioned by an administrator; contact fields patched by
      the designer profile endpoint.
    - Portfolio: read-only here.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import UTCDateTime, UserRole, enum_type, utcnow


class User(Base):
    """
    A person known to the identity provider.

    Query Patterns:
        - Sign-in / session restore: WHERE clerk_id = :external_id (unique index)
        - Designer directory: WHERE role = 'designer'
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Opaque subject id issued by the external identity provider (Clerk)
    clerk_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="External identity provider subject id",
    )

    email: Mapped[str] = mapped_column(String(320), nullable=False)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(120), nullable=False, default="")

    role: Mapped[UserRole] = mapped_column(
        enum_type(UserRole),
        nullable=False,
        default=UserRole.CLIENT,
        comment="client, designer or admin",
    )

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("uq_users_clerk_id", "clerk_id", unique=True),
        Index("idx_users_role", "role"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, role='{self.role.value}', email='{self.email}')>"


class Designer(Base):
    """Designer profile owned by exactly one user (1:1 by user_id)."""

    __tablename__ = "designers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    contact_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (Index("idx_designers_user_id", "user_id"),)

    def __repr__(self) -> str:
        return f"<Designer(id={self.id}, user_id={self.user_id})>"


class Portfolio(Base):
    """Portfolio of a designer; carries the specialization and skill tags."""

    __tablename__ = "portfolios"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    designer_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    specialization: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Stored as a JSON array of strings; order is preserved, duplicates are not
    # removed by the store
    skills: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    __table_args__ = (Index("idx_portfolios_designer_id", "designer_id"),)

    def __repr__(self) -> str:
        return f"<Portfolio(id={self.id}, designer_id={self.designer_id})>"
