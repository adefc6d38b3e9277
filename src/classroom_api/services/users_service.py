"""
classroom_api.services.users_service

User record CRUD over Firestore and Firebase Authentication.

Responsibilities:
- Create/update/delete users across both the identity provider and `users/{uid}`.
- Read user documents with the `class` reference expanded to the class data.
"""

from __future__ import annotations

from typing import Any

from google.cloud.firestore import DocumentSnapshot

from classroom_api.db.repositories.classes import ClassRepo
from classroom_api.db.repositories.users import CLASS_FIELD, UserRepo
from classroom_api.errors import ApiError
from classroom_api.firebase.identity import IdentityClient
from classroom_api.observability.logging import get_logger
from classroom_api.services.auth_service import AuthService
from classroom_api.services.provider_errors import missing, provider_errors

log = get_logger(__name__)


class UsersService:
    def __init__(
        self,
        *,
        auth: AuthService,
        identity: IdentityClient,
        users: UserRepo,
        classes: ClassRepo,
    ) -> None:
        self._auth = auth
        self._identity = identity
        self._users = users
        self._classes = classes

    async def create_user(
        self,
        email: str | None,
        name: str | None,
        role: str | None,
        class_id: str | None,
    ) -> str:
        if missing(email, name, role, class_id):
            raise ApiError.bad_request()
        with provider_errors(ApiError.internal("Error creating user"), operation="create_user"):
            class_ref = self._classes.ref(class_id)
            return await self._auth.create_user(email, name, role, class_ref)

    async def update_user(
        self,
        uid: str | None,
        *,
        email: str | None = None,
        name: str | None = None,
        role: str | None = None,
        class_id: str | None = None,
    ) -> None:
        fields: dict[str, Any] = {}
        if email:
            fields["email"] = email
        if name:
            fields["name"] = name
        if role:
            fields["role"] = role
        if missing(uid) or not (fields or class_id):
            raise ApiError.bad_request()

        with provider_errors(
            ApiError.internal("Error updating user"), operation="update_user", uid=uid
        ):
            if class_id:
                fields[CLASS_FIELD] = self._classes.ref(class_id)
            await self._users.update(uid, fields)
            if role:
                await self._auth.set_user_role(uid, role)
            # Revoked on every update, role change or not.
            await self._auth.revoke_refresh_tokens(uid)
        log.info("user_updated", uid=uid, fields=sorted(fields))

    async def get_user_by_uid(self, uid: str | None) -> dict[str, Any]:
        if missing(uid):
            raise ApiError.bad_request()
        with provider_errors(ApiError.internal("Error getting user"), operation="get_user", uid=uid):
            snapshot = await self._users.get(uid)
            if not snapshot.exists:
                raise ApiError.not_found("User not found")
            return await self._expand(snapshot)

    async def get_all_users(self) -> list[dict[str, Any]]:
        with provider_errors(ApiError.internal("Error getting users"), operation="get_all_users"):
            return [await self._expand(snapshot) async for snapshot in self._users.stream()]

    async def delete_user(self, uid: str | None) -> None:
        if missing(uid):
            raise ApiError.bad_request()
        with provider_errors(
            ApiError.internal("Error deleting user"), operation="delete_user", uid=uid
        ):
            await self._identity.delete_user(uid)
            await self._users.delete(uid)
        log.info("user_deleted", uid=uid)

    async def _expand(self, snapshot: DocumentSnapshot) -> dict[str, Any]:
        data = snapshot.to_dict() or {}
        class_ref = data.get(CLASS_FIELD)
        if class_ref is not None:
            data[CLASS_FIELD] = await self._classes.resolve(class_ref)
        return {"id": snapshot.id, **data}


# --- Module Notes -----------------------------------------------------------
# delete_user removes the identity before the document.
