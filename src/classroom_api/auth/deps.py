"""
classroom_api.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Convert a bearer token into a typed `Principal` via the identity provider.
- Enforce the role claim via reusable dependency factories.
"""

from __future__ import annotations

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from classroom_api.api.deps import auth_service
from classroom_api.auth.models import Principal
from classroom_api.errors import ApiError
from classroom_api.observability.logging import get_logger
from classroom_api.services.auth_service import AuthService

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


async def get_principal(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth: AuthService = Depends(auth_service),
) -> Principal:
    # Never log the token value; only presence and outcome.
    if creds is None or not creds.credentials:
        log.warning("auth_failure", reason="missing_bearer_token")
        raise ApiError.unauthorized()

    try:
        claims = await auth.verify_token(creds.credentials)
    except ApiError as e:
        log.warning("auth_failure", reason="verify_id_token_failed", status=e.status_code)
        raise ApiError.forbidden("Access Denied") from e

    principal = Principal.from_claims(claims)
    if not principal.uid:
        log.warning("auth_failure", reason="missing_uid")
        raise ApiError.forbidden("Access Denied")

    request.state.user = principal
    structlog.contextvars.bind_contextvars(uid=principal.uid)
    return principal


def require_roles(*allowed: str):
    allowed_set = frozenset(allowed)

    async def _dep(principal: Principal = Depends(get_principal)) -> Principal:
        # No declared roles: authentication alone is enough.
        if allowed_set and principal.role not in allowed_set:
            log.warning("auth_failure", reason="role_not_allowed", role=principal.role)
            raise ApiError.forbidden()
        return principal

    return _dep


# --- Module Notes -----------------------------------------------------------
# Routers attach `get_principal` at router level and `require_roles(...)` per route,
# so a route's required role sits next to its path.
