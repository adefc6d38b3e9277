"""
classroom_api.api.routers.users

User management endpoints.

Responsibilities:
- CRUD over user records; every route requires a verified bearer token.
- Mutations and listing are restricted to the `admin` role.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import HTTP_201_CREATED

from classroom_api.api.deps import users_service
from classroom_api.auth.deps import get_principal, require_roles
from classroom_api.services.users_service import UsersService

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_principal)])


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the service so every missing field maps to the same 400.
    email: str | None = None
    name: str | None = None
    role: str | None = None
    class_id: str | None = Field(default=None, alias="classId")


class UpdateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    name: str | None = None
    role: str | None = None
    class_id: str | None = Field(default=None, alias="classId")


@router.post(
    "",
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(require_roles("admin"))],
)
async def create_user(
    body: CreateUserRequest,
    users: UsersService = Depends(users_service),
) -> str:
    return await users.create_user(body.email, body.name, body.role, body.class_id)


@router.get("/{uid}")
async def get_user(
    uid: str,
    users: UsersService = Depends(users_service),
) -> dict[str, Any]:
    return await users.get_user_by_uid(uid)


@router.put("/{uid}", dependencies=[Depends(require_roles("admin"))])
async def update_user(
    uid: str,
    body: UpdateUserRequest,
    users: UsersService = Depends(users_service),
) -> None:
    await users.update_user(
        uid,
        email=body.email,
        name=body.name,
        role=body.role,
        class_id=body.class_id,
    )


@router.delete("/{uid}", dependencies=[Depends(require_roles("admin"))])
async def delete_user(
    uid: str,
    users: UsersService = Depends(users_service),
) -> None:
    await users.delete_user(uid)


@router.get("", dependencies=[Depends(require_roles("admin"))])
async def list_users(
    users: UsersService = Depends(users_service),
) -> list[dict[str, Any]]:
    return await users.get_all_users()
