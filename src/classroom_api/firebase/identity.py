"""
classroom_api.firebase.identity

Async client boundary for the identity provider (Firebase Authentication).

Responsibilities:
- Run the blocking `firebase_admin.auth` calls in the threadpool.
- Exchange custom tokens for ID tokens through the Identity Toolkit REST API.
- Provide a stable interface that tests replace with an in-memory fake.
"""

from __future__ import annotations

from typing import Any

import firebase_admin
import httpx
from fastapi.concurrency import run_in_threadpool
from firebase_admin import auth

from classroom_api.settings import Settings


class IdentityClient:
    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        app: firebase_admin.App | None = None,
    ) -> None:
        self._settings = settings
        self._http = http
        self._app = app

    async def verify_id_token(self, token: str) -> dict[str, Any]:
        # Revocation check costs an extra lookup but makes revoke_refresh_tokens effective immediately.
        return await run_in_threadpool(
            auth.verify_id_token,
            token,
            app=self._app,
            check_revoked=self._settings.check_revoked,
        )

    async def get_user(self, uid: str) -> auth.UserRecord:
        return await run_in_threadpool(auth.get_user, uid, app=self._app)

    async def create_user(self, *, email: str, display_name: str) -> auth.UserRecord:
        return await run_in_threadpool(
            auth.create_user, email=email, display_name=display_name, app=self._app
        )

    async def delete_user(self, uid: str) -> None:
        await run_in_threadpool(auth.delete_user, uid, app=self._app)

    async def set_custom_user_claims(self, uid: str, claims: dict[str, Any]) -> None:
        await run_in_threadpool(auth.set_custom_user_claims, uid, claims, app=self._app)

    async def revoke_refresh_tokens(self, uid: str) -> None:
        await run_in_threadpool(auth.revoke_refresh_tokens, uid, app=self._app)

    async def create_custom_token(self, uid: str) -> str:
        token = await run_in_threadpool(auth.create_custom_token, uid, app=self._app)
        return token.decode() if isinstance(token, bytes) else token

    async def sign_in_with_custom_token(self, custom_token: str) -> str:
        r = await self._http.post(
            "/accounts:signInWithCustomToken",
            params={"key": self._settings.firebase_api_key},
            json={"token": custom_token, "returnSecureToken": True},
        )
        r.raise_for_status()
        return r.json()["idToken"]


def create_identity_http(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.identity_toolkit_url,
        timeout=settings.http_timeout_seconds,
    )


# --- Module Notes -----------------------------------------------------------
# Against the Auth emulator, point CLASSROOM_IDENTITY_TOOLKIT_URL at
# http://<host>/identitytoolkit.googleapis.com/v1; the Admin SDK itself honors
# FIREBASE_AUTH_EMULATOR_HOST.
