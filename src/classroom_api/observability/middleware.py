"""
classroom_api.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Accept a caller's `x-request-id` or generate one, and echo it on the response.
- Bind request metadata into structlog contextvars for the request's lifetime.
- Emit one `http_request` access line per request with status and latency.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from classroom_api.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        start = time.perf_counter()
        status_code = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
        finally:
            log.info(
                "http_request",
                status_code=status_code,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# The endpoint runs in a child task of `call_next`, so values it binds (the uid from
# the auth guard) appear on its own lines but not on the access line.
