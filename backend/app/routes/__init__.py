# Routes package init
"""
TechShirt Backend - API Routes Package
========================================

What:  HTTP route handlers; each module covers one resource.

Route Inventory:
    - comments.py:       preview comment threads
    - notifications.py:  design-update trigger, direct/bulk notify, feed
    - pricing.py:        designer pricing and print pricing CRUD
    - designers.py:      designer profile lookup and edit
    - inventory.py:      items, categories, textiles, stock consumption
    - files.py:          handle → URL resolution, upload, blob serving
    - ratings.py:        rating submission
    - users.py:          identity lookup, listings, designer directory
    - health.py:         GET /health

Routes stay thin: read the request, call one service method, return its
result. Errors propagate to the handlers registered in main.py.
"""
