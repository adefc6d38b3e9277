"""
classroom_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, platform clients and services.
- Encapsulate app.state access patterns (identity client, Firestore client).
"""

from __future__ import annotations

from fastapi import Depends, Request
from google.cloud.firestore import AsyncClient

from classroom_api.db.repositories.classes import ClassRepo
from classroom_api.db.repositories.users import UserRepo
from classroom_api.firebase.identity import IdentityClient
from classroom_api.services.auth_service import AuthService
from classroom_api.services.users_service import UsersService
from classroom_api.settings import Settings, get_settings


def settings_dep(request: Request) -> Settings:
    # Settings passed to `create_app`; falls back to the env-driven instance.
    return getattr(request.app.state, "settings", None) or get_settings()


def identity_from_app(request: Request) -> IdentityClient:
    # Built on app startup in `classroom_api.api.app.create_app`.
    return request.app.state.identity  # type: ignore[attr-defined]


def firestore_from_app(request: Request) -> AsyncClient:
    return request.app.state.firestore  # type: ignore[attr-defined]


def user_repo(
    db: AsyncClient = Depends(firestore_from_app),
    settings: Settings = Depends(settings_dep),
) -> UserRepo:
    return UserRepo(db, collection=settings.users_collection)


def class_repo(
    db: AsyncClient = Depends(firestore_from_app),
    settings: Settings = Depends(settings_dep),
) -> ClassRepo:
    return ClassRepo(db, collection=settings.classes_collection)


def auth_service(
    identity: IdentityClient = Depends(identity_from_app),
    users: UserRepo = Depends(user_repo),
) -> AuthService:
    return AuthService(identity=identity, users=users)


def users_service(
    auth: AuthService = Depends(auth_service),
    identity: IdentityClient = Depends(identity_from_app),
    users: UserRepo = Depends(user_repo),
    classes: ClassRepo = Depends(class_repo),
) -> UsersService:
    return UsersService(auth=auth, identity=identity, users=users, classes=classes)


# --- Module Notes -----------------------------------------------------------
# Tests pass settings and fake platform clients through `create_app`.
