"""
TechShirt Backend - User Directory Service
============================================

What:  User lookup by external identity id, full and public listings, the
       designer directory, and the sign-in upsert from the identity provider.
How:   The designer directory is a batch-fetch-then-map join:

    users (role=designer) ──┐
    designers (user_id IN …) ├──▶ first designer per user ──▶ first portfolio
    portfolios (designer_id IN …) ┘                           per designer

    Three queries in total regardless of the number of designers; "first"
    means earliest created_at.
Who:   Called by the user routes (admin users page, designer picker in the
       request form, sign-in webhook).
"""

import logging
import uuid
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidStateError
from app.models.types import UserRole
from app.models.user import Designer, Portfolio, User
from app.schemas.user import DesignerListing, IdentityUpsert, UserResponse, UserSummary

logger = logging.getLogger(__name__)

DEFAULT_SPECIALIZATION = "General"


class UserService:
    """
    Business logic for the user directory.

    Responsibilities:
        - get_user_by_clerk_id(): unique lookup, None when absent
        - list_all_users(): every user, all fields
        - list_designers(): designer-role users enriched with portfolio data
        - list_all(): minimal public projection
        - upsert_from_identity(): create or refresh a user on sign-in
    """

    async def get_user_by_clerk_id(
        self, db: AsyncSession, clerk_id: str
    ) -> Optional[UserResponse]:
        """
        Raises:
            InvalidStateError: more than one user carries this identity id
        """
        user = await self._find_by_clerk_id(db, clerk_id)
        return UserResponse.model_validate(user) if user else None

    async def list_all_users(self, db: AsyncSession) -> List[UserResponse]:
        result = await db.execute(select(User).order_by(User.created_at))
        return [UserResponse.model_validate(u) for u in result.scalars().all()]

    async def list_designers(self, db: AsyncSession) -> List[DesignerListing]:
        """
        Every designer-role user exactly once, merged with specialization,
        skills and portfolio id from their first portfolio. Users without a
        designer record or portfolio get "General", [] and None.
        """
        result = await db.execute(
            select(User).where(User.role == UserRole.DESIGNER).order_by(User.created_at)
        )
        users = list(result.scalars().all())
        if not users:
            return []

        designer_by_user: Dict[uuid.UUID, Designer] = {}
        result = await db.execute(
            select(Designer)
            .where(Designer.user_id.in_([u.id for u in users]))
            .order_by(Designer.created_at)
        )
        for designer in result.scalars().all():
            designer_by_user.setdefault(designer.user_id, designer)

        portfolio_by_designer: Dict[uuid.UUID, Portfolio] = {}
        if designer_by_user:
            result = await db.execute(
                select(Portfolio)
                .where(Portfolio.designer_id.in_([d.id for d in designer_by_user.values()]))
                .order_by(Portfolio.created_at)
            )
            for portfolio in result.scalars().all():
                portfolio_by_designer.setdefault(portfolio.designer_id, portfolio)

        listings = []
        for user in users:
            designer = designer_by_user.get(user.id)
            portfolio = portfolio_by_designer.get(designer.id) if designer else None
            listings.append(
                DesignerListing(
                    **UserResponse.model_validate(user).model_dump(),
                    specialization=(
                        portfolio.specialization
                        if portfolio and portfolio.specialization
                        else DEFAULT_SPECIALIZATION
                    ),
                    skills=list(portfolio.skills or []) if portfolio else [],
                    portfolio_id=portfolio.id if portfolio else None,
                )
            )
        return listings

    async def list_all(self, db: AsyncSession) -> List[UserSummary]:
        result = await db.execute(
            select(User.id, User.first_name, User.last_name, User.email).order_by(User.created_at)
        )
        return [
            UserSummary(
                id=row.id,
                first_name=row.first_name,
                last_name=row.last_name,
                email=row.email,
            )
            for row in result
        ]

    async def upsert_from_identity(
        self, db: AsyncSession, payload: IdentityUpsert
    ) -> UserResponse:
        """Patch the user matching clerk_id, or insert a new one."""
        user = await self._find_by_clerk_id(db, payload.clerk_id)
        if user is not None:
            user.email = payload.email
            user.first_name = payload.first_name
            user.last_name = payload.last_name
            user.role = payload.role
            await db.flush()
            logger.info("Identity %s refreshed user %s", payload.clerk_id, user.id)
        else:
            user = User(
                clerk_id=payload.clerk_id,
                email=payload.email,
                first_name=payload.first_name,
                last_name=payload.last_name,
                role=payload.role,
            )
            db.add(user)
            await db.flush()
            logger.info("Identity %s created user %s (%s)", payload.clerk_id, user.id, user.role.value)
        return UserResponse.model_validate(user)

    async def _find_by_clerk_id(self, db: AsyncSession, clerk_id: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.clerk_id == clerk_id))
        try:
            return result.scalar_one_or_none()
        except MultipleResultsFound:
            logger.error("Identity id %s matches more than one user", clerk_id)
            raise InvalidStateError(
                message="More than one user is linked to this identity",
                context={"clerk_id": clerk_id},
            )


user_service = UserService()
