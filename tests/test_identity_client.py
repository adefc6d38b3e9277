"""
tests.test_identity_client

IdentityClient: delegation to `firebase_admin.auth` and the REST token exchange.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
from firebase_admin import auth

from classroom_api.firebase.identity import IdentityClient, create_identity_http
from classroom_api.settings import Settings


def _settings(**overrides: Any) -> Settings:
    return Settings(_env_file=None, env="test", firebase_api_key="web-key", **overrides)


@pytest.mark.asyncio
async def test_sign_in_with_custom_token() -> None:
    seen: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["key"] = request.url.params.get("key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"idToken": "id-123", "refreshToken": "r"})

    settings = _settings()
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=settings.identity_toolkit_url
    ) as http:
        client = IdentityClient(settings=settings, http=http)
        assert await client.sign_in_with_custom_token("custom-abc") == "id-123"

    assert seen["path"] == "/v1/accounts:signInWithCustomToken"
    assert seen["key"] == "web-key"
    assert seen["body"] == {"token": "custom-abc", "returnSecureToken": True}


@pytest.mark.asyncio
async def test_sign_in_with_custom_token_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"message": "INVALID_CUSTOM_TOKEN"}})

    settings = _settings()
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=settings.identity_toolkit_url
    ) as http:
        client = IdentityClient(settings=settings, http=http)
        with pytest.raises(httpx.HTTPStatusError):
            await client.sign_in_with_custom_token("bad")


@pytest.mark.asyncio
async def test_verify_id_token_checks_revocation(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, dict[str, Any]]] = []

    def fake_verify(token: str, **kwargs: Any) -> dict[str, Any]:
        calls.append((token, kwargs))
        return {"uid": "u-1"}

    monkeypatch.setattr(auth, "verify_id_token", fake_verify)
    app = object()
    async with httpx.AsyncClient() as http:
        client = IdentityClient(settings=_settings(), http=http, app=app)
        assert await client.verify_id_token("tok") == {"uid": "u-1"}

    assert calls == [("tok", {"app": app, "check_revoked": True})]


@pytest.mark.asyncio
async def test_create_custom_token_returns_text(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(auth, "create_custom_token", lambda uid, app=None: b"signed." + uid.encode())

    async with httpx.AsyncClient() as http:
        client = IdentityClient(settings=_settings(), http=http)
        assert await client.create_custom_token("u-1") == "signed.u-1"


@pytest.mark.asyncio
async def test_create_user_passes_display_name(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    def fake_create_user(**kwargs: Any) -> str:
        seen.update(kwargs)
        return "record"

    monkeypatch.setattr(auth, "create_user", fake_create_user)
    async with httpx.AsyncClient() as http:
        client = IdentityClient(settings=_settings(), http=http)
        assert await client.create_user(email="a@b.test", display_name="A") == "record"

    assert seen == {"email": "a@b.test", "display_name": "A", "app": None}


@pytest.mark.asyncio
async def test_identity_http_uses_configured_base_url() -> None:
    settings = _settings(identity_toolkit_url="http://localhost:9099/identitytoolkit.googleapis.com/v1")
    http = create_identity_http(settings)
    try:
        assert str(http.base_url) == "http://localhost:9099/identitytoolkit.googleapis.com/v1/"
    finally:
        await http.aclose()
