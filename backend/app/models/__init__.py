# Models package init
"""
Importing this package registers every table on Base.metadata. Alembic's env
and the test fixtures import it before touching the schema.
"""

from app.models.design import Comment, Design, DesignPreview, Notification, RatingFeedback
from app.models.inventory import InventoryCategory, InventoryItem
from app.models.pricing import DesignerPricing, PrintPricing
from app.models.stored_file import StoredFile
from app.models.types import DesignStatus, PrintType, UserRole
from app.models.user import Designer, Portfolio, User

__all__ = [
    "Comment",
    "Design",
    "DesignPreview",
    "DesignStatus",
    "Designer",
    "DesignerPricing",
    "InventoryCategory",
    "InventoryItem",
    "Notification",
    "Portfolio",
    "PrintPricing",
    "PrintType",
    "RatingFeedback",
    "StoredFile",
    "User",
    "UserRole",
]
