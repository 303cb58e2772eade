# Services package init
"""
TechShirt Backend - Services Layer
====================================

What:  Business logic between routes (HTTP) and the database.
How:   Each service is a stateless class with a module-level singleton.
       Methods take the request's AsyncSession first, flush their writes,
       and return Pydantic models. Committing is left to get_db_session.

Service Inventory:
    - CommentService:          preview comments
    - NotificationService:     design-update trigger, notifications, feed
    - DesignerPricingService,
      PrintPricingService:     pricing CRUD
    - DesignerService:         designer profile
    - InventoryService:        items, categories, textiles, stock
    - FileService:             storage handles → URLs, uploads
    - BlobStore (abstract),
      LocalBlobStore:          blob bytes on disk
    - RatingService:           ratings and feedback
    - UserService:             user directory and identity upsert
"""
