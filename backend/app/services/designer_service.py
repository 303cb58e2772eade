"""
TechShirt Backend - Designer Profile Service
==============================================

What:  Look up a designer profile by its owning user and patch its contact
       fields.
Who:   Called by the designer routes (designer settings page).
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.user import Designer
from app.schemas.designer import DesignerProfileUpdate, DesignerResponse

logger = logging.getLogger(__name__)


class DesignerService:

    async def get_by_user(
        self, db: AsyncSession, user_id: uuid.UUID
    ) -> Optional[DesignerResponse]:
        """First designer record owned by the user, or None."""
        result = await db.execute(
            select(Designer)
            .where(Designer.user_id == user_id)
            .order_by(Designer.created_at)
            .limit(1)
        )
        designer = result.scalars().first()
        if designer is None:
            logger.debug("No designer profile for user %s", user_id)
            return None
        return DesignerResponse.model_validate(designer)

    async def update_profile(
        self,
        db: AsyncSession,
        designer_id: uuid.UUID,
        payload: DesignerProfileUpdate,
    ) -> DesignerResponse:
        """
        Write whichever of contact_number / address were supplied.

        Omitted and null fields both leave the stored value untouched.

        Raises:
            NotFoundError: no designer with this id
        """
        designer = await db.get(Designer, designer_id)
        if designer is None:
            raise NotFoundError(resource="designer", resource_id=str(designer_id))

        updates = payload.model_dump(exclude_none=True)
        for field, value in updates.items():
            setattr(designer, field, value)
        await db.flush()
        logger.info("Designer %s profile updated: %s", designer_id, sorted(updates))
        return DesignerResponse.model_validate(designer)


designer_service = DesignerService()
