"""
classroom_api.api.routers.auth

Identity endpoints (roles, token minting and verification).

Responsibilities:
- Read and assign the role of a user.
- Mint an ID token for a uid (non-prod only) and verify ID tokens.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from classroom_api.api.deps import auth_service, settings_dep
from classroom_api.auth.deps import get_principal, require_roles
from classroom_api.errors import ApiError
from classroom_api.services.auth_service import AuthService
from classroom_api.settings import Settings

router = APIRouter(prefix="/auth", tags=["auth"])


class SetUserRoleResponse(BaseModel):
    status: int = 200
    message: str = "User role set successfully"


@router.get("/getUserRole", dependencies=[Depends(get_principal)])
async def get_user_role(
    uid: str | None = None,
    auth: AuthService = Depends(auth_service),
) -> str | None:
    return await auth.get_user_role(uid)


@router.get(
    "/setUserRole",
    response_model=SetUserRoleResponse,
    dependencies=[Depends(require_roles("admin"))],
)
async def set_user_role(
    uid: str | None = None,
    role: str | None = None,
    auth: AuthService = Depends(auth_service),
) -> SetUserRoleResponse:
    await auth.set_user_role(uid, role)
    return SetUserRoleResponse()


@router.get("/createCustomToken")
async def create_custom_token(
    uid: str | None = None,
    auth: AuthService = Depends(auth_service),
    settings: Settings = Depends(settings_dep),
) -> str:
    # Mints a signed-in ID token for any existing uid; dev/test convenience only.
    if settings.env == "prod":
        raise ApiError.not_found("Not found")
    return await auth.create_custom_token(uid)


@router.get("/verifyToken")
async def verify_token(
    token: str | None = None,
    auth: AuthService = Depends(auth_service),
) -> dict[str, Any]:
    return await auth.verify_token(token)


# --- Module Notes -----------------------------------------------------------
# Paths keep their camelCase names; existing web clients call them as-is.
