# Middleware package init
"""
TechShirt Backend - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → Route

    - Rate Limit rejects over-quota clients before any other work
    - Request ID is set before the access log line is written, so the two
      always agree
    - The access log measures duration around everything below it
"""
