"""
classroom_api.services.provider_errors

Translation of platform (Firebase) failures into service errors.

Responsibilities:
- Log the provider exception with operation context.
- Replace it with a fixed, client-safe `ApiError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from classroom_api.errors import ApiError
from classroom_api.observability.logging import get_logger

log = get_logger(__name__)


@contextmanager
def provider_errors(error: ApiError, *, operation: str, **fields: Any) -> Iterator[None]:
    try:
        yield
    except ApiError:
        # Already translated by an inner operation; keep its status and message.
        raise
    except Exception as e:
        level = log.error if error.status_code >= 500 else log.warning
        level(
            "provider_call_failed",
            operation=operation,
            status=error.status_code,
            error=f"{type(e).__name__}: {e}",
            **fields,
        )
        raise error from e


def missing(*values: Any) -> bool:
    # Absent query params/body fields arrive as None; empty strings are never valid ids.
    return any(v is None or v == "" for v in values)
