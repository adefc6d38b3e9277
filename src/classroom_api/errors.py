"""
classroom_api.errors

Service-layer error type.

Responsibilities:
- Carry an HTTP status and a fixed, client-safe message out of the service layer.
- Render the uniform error envelope used by every error response.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

INVALID_INPUT = "Invalid input data"


class ApiError(Exception):
    """
    Raised by services; rendered by the global handler in `api.errors`.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def bad_request(cls, message: str = INVALID_INPUT) -> ApiError:
        return cls(HTTP_400_BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> ApiError:
        return cls(HTTP_401_UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden resource") -> ApiError:
        return cls(HTTP_403_FORBIDDEN, message)

    @classmethod
    def not_found(cls, message: str) -> ApiError:
        return cls(HTTP_404_NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> ApiError:
        return cls(HTTP_500_INTERNAL_SERVER_ERROR, message)

    def to_response(self) -> dict[str, Any]:
        return error_body(self.status_code, self.message)


def error_body(status_code: int, message: str) -> dict[str, Any]:
    return {
        "status": status_code,
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "message": message,
    }


# --- Module Notes -----------------------------------------------------------
# Messages are fixed strings on purpose: provider exception text is logged, never returned.
