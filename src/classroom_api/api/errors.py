"""
classroom_api.api.errors

Global exception handlers.

Responsibilities:
- Render `ApiError`, Starlette `HTTPException` and validation errors as
  `{status, timestamp, message}`.
- Catch-all for anything else: log with traceback, never leak internals.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from classroom_api.errors import INVALID_INPUT, ApiError, error_body
from classroom_api.observability.logging import get_logger

log = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        log.warning("request_validation_failed", errors=exc.errors())
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content=error_body(HTTP_400_BAD_REQUEST, INVALID_INPUT),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        log.error("unhandled_exception", exc_info=exc)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
        )


# --- Module Notes -----------------------------------------------------------
# The Exception handler runs in Starlette's ServerErrorMiddleware, outside the request
# context middleware, so its log line carries no request_id.
