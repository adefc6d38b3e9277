"""
tests.conftest

Shared fixtures: settings, platform fakes, the app and an in-process HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from classroom_api.api.app import create_app
from classroom_api.db.repositories.classes import ClassRepo
from classroom_api.db.repositories.users import UserRepo
from classroom_api.services.auth_service import AuthService
from classroom_api.services.users_service import UsersService
from classroom_api.settings import Settings
from tests.fakes import FakeFirestore, FakeIdentity, FakeUserRecord

ADMIN_TOKEN = "admin-token"
TEACHER_TOKEN = "teacher-token"


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, env="test", log_level="WARNING")


@pytest.fixture
def firestore() -> FakeFirestore:
    db = FakeFirestore()
    db.docs["classes/c-1"] = {"name": "5A", "year": 5}
    db.docs["classes/c-2"] = {"name": "6B", "year": 6}
    return db


@pytest.fixture
def identity(firestore: FakeFirestore) -> FakeIdentity:
    fake = FakeIdentity()
    fake.users["admin-1"] = FakeUserRecord(uid="admin-1", email="admin@school.test")
    fake.users["teacher-1"] = FakeUserRecord(uid="teacher-1", email="t@school.test")
    fake.tokens[ADMIN_TOKEN] = {"uid": "admin-1", "email": "admin@school.test", "role": "admin"}
    fake.tokens[TEACHER_TOKEN] = {"uid": "teacher-1", "email": "t@school.test", "role": "teacher"}
    firestore.docs["users/admin-1"] = {
        "email": "admin@school.test",
        "name": "Ada Admin",
        "role": "admin",
        "class": firestore.collection("classes").document("c-1"),
    }
    firestore.docs["users/teacher-1"] = {
        "email": "t@school.test",
        "name": "Tom Teacher",
        "role": "teacher",
        "class": firestore.collection("classes").document("c-2"),
    }
    return fake


@pytest.fixture
def user_repo(firestore: FakeFirestore) -> UserRepo:
    return UserRepo(firestore)


@pytest.fixture
def auth_service(identity: FakeIdentity, user_repo: UserRepo) -> AuthService:
    return AuthService(identity=identity, users=user_repo)


@pytest.fixture
def users_service(
    auth_service: AuthService,
    identity: FakeIdentity,
    user_repo: UserRepo,
    firestore: FakeFirestore,
) -> UsersService:
    return UsersService(
        auth=auth_service, identity=identity, users=user_repo, classes=ClassRepo(firestore)
    )


@pytest.fixture
def app(settings: Settings, identity: FakeIdentity, firestore: FakeFirestore) -> FastAPI:
    return create_app(settings=settings, identity=identity, firestore=firestore)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # ASGITransport does not run lifespan events; enter the lifespan explicitly.
    # Unhandled errors are rendered by the catch-all handler, then re-raised by Starlette.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
