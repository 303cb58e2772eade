"""
TechShirt Backend - Request ID Middleware
===========================================

What:  Tags every request with a short correlation id and echoes it back.
How:   Uses the inbound X-Request-ID header when present, otherwise the first
       8 characters of a UUID4. The id lives in a ContextVar so loggers and
       exception handlers can read it without access to the request object.
Who:   Applied to every request via Starlette middleware.

    browser ──X-Request-ID: 1a2b3c4d──▶ backend ──▶ access log, error body
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local; concurrent requests each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns the request id.

    Behavior:
        1. Take X-Request-ID from the client if sent
        2. Otherwise generate a short UUID
        3. Store it in request_id_var and request.state.request_id
        4. Copy it onto the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
