"""
classroom_api.services.auth_service

Identity operations (Firebase Authentication + the role mirror in Firestore).

Responsibilities:
- Verify ID tokens and mint/exchange custom tokens.
- Keep the `role` custom claim and the `users/{uid}.role` field in step.
- Revoke refresh tokens whenever a user's claims change.
"""

from __future__ import annotations

from typing import Any

from firebase_admin import auth
from google.cloud.firestore import AsyncDocumentReference

from classroom_api.db.repositories.users import UserRepo
from classroom_api.errors import ApiError
from classroom_api.firebase.identity import IdentityClient
from classroom_api.observability.logging import get_logger
from classroom_api.services.provider_errors import missing, provider_errors

log = get_logger(__name__)


class AuthService:
    def __init__(self, *, identity: IdentityClient, users: UserRepo) -> None:
        self._identity = identity
        self._users = users

    async def verify_token(self, token: str | None) -> dict[str, Any]:
        if missing(token):
            raise ApiError.bad_request()
        with provider_errors(ApiError.unauthorized("Invalid token"), operation="verify_token"):
            return await self._identity.verify_id_token(token)

    async def get_user_by_uid(self, uid: str | None) -> auth.UserRecord:
        if missing(uid):
            raise ApiError.bad_request()
        with provider_errors(ApiError.not_found("User not found"), operation="get_user", uid=uid):
            return await self._identity.get_user(uid)

    async def create_custom_token(self, uid: str | None) -> str:
        """
        Mint a custom token for `uid` and exchange it for an ID token.

        The identity must already exist; signing in with a custom token for an
        unknown uid would otherwise create a bare account as a side effect.
        """
        if missing(uid):
            raise ApiError.bad_request()
        await self.get_user_by_uid(uid)

        with provider_errors(
            ApiError.internal("Error creating custom token"),
            operation="create_custom_token",
            uid=uid,
        ):
            custom_token = await self._identity.create_custom_token(uid)
            return await self._identity.sign_in_with_custom_token(custom_token)

    async def set_custom_user_claims(self, uid: str | None, claims: dict[str, Any] | None) -> None:
        if missing(uid, claims):
            raise ApiError.bad_request()
        with provider_errors(
            ApiError.internal("Error setting custom claims"),
            operation="set_custom_user_claims",
            uid=uid,
        ):
            await self._identity.set_custom_user_claims(uid, claims)

    async def set_user_role(self, uid: str | None, role: str | None) -> None:
        if missing(uid, role):
            raise ApiError.bad_request()
        with provider_errors(
            ApiError.internal("Error setting user role"), operation="set_user_role", uid=uid
        ):
            await self._users.update(uid, {"role": role})
            await self.set_custom_user_claims(uid, {"role": role})
            await self.revoke_refresh_tokens(uid)
        log.info("user_role_set", uid=uid, role=role)

    async def get_user_role(self, uid: str | None) -> str | None:
        if missing(uid):
            raise ApiError.bad_request()
        with provider_errors(
            ApiError.internal("Error getting user role"), operation="get_user_role", uid=uid
        ):
            snapshot = await self._users.get(uid)
        if not snapshot.exists:
            return None
        return (snapshot.to_dict() or {}).get("role")

    async def revoke_refresh_tokens(self, uid: str | None) -> None:
        if missing(uid):
            raise ApiError.bad_request()
        with provider_errors(
            ApiError.internal("Error revoking refresh tokens"),
            operation="revoke_refresh_tokens",
            uid=uid,
        ):
            await self._identity.revoke_refresh_tokens(uid)

    async def create_user(
        self,
        email: str | None,
        name: str | None,
        role: str | None,
        class_ref: AsyncDocumentReference | None,
    ) -> str:
        if missing(email, name, role, class_ref):
            raise ApiError.bad_request()
        with provider_errors(ApiError.internal("Error creating user"), operation="create_user"):
            record = await self._identity.create_user(email=email, display_name=name)
            await self._users.create(
                record.uid, email=email, name=name, role=role, class_ref=class_ref
            )
            await self.set_custom_user_claims(record.uid, {"role": role})
            await self.revoke_refresh_tokens(record.uid)
        log.info("user_created", uid=record.uid, role=role)
        return record.uid


# --- Module Notes -----------------------------------------------------------
# The role lives in two places: the custom claim (what the role guard reads from the
# token) and the user document (what `get_user_role` reads). Both are written here.
