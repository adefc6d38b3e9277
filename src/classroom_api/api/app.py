"""
classroom_api.api.app

FastAPI app factory for the classroom backend.

Responsibilities:
- Build the FastAPI application and register routers, middleware and error handlers.
- Initialize and dispose shared infrastructure (Firebase app, Firestore client, HTTP client).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from google.cloud.firestore import AsyncClient

from classroom_api import __version__
from classroom_api.api.errors import register_error_handlers
from classroom_api.api.routers.auth import router as auth_router
from classroom_api.api.routers.health import router as health_router
from classroom_api.api.routers.users import router as users_router
from classroom_api.db.client import create_firestore_client
from classroom_api.firebase.app import init_firebase_app
from classroom_api.firebase.identity import IdentityClient, create_identity_http
from classroom_api.observability.logging import configure_logging, get_logger
from classroom_api.observability.middleware import RequestContextMiddleware
from classroom_api.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    identity: IdentityClient | None = None,
    firestore: AsyncClient | None = None,
    http: httpx.AsyncClient | None = None,
) -> FastAPI:
    """
    Build the app. Pre-built platform clients (fakes in tests) skip Firebase initialization.
    """
    configure_logging(
        service_name=settings.service_name, env=settings.env, level=settings.log_level
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        owned_http = None
        if http is None:
            owned_http = create_identity_http(settings)

        firebase_app = None
        if identity is None or firestore is None:
            firebase_app = init_firebase_app(settings)

        app.state.identity = identity or IdentityClient(
            settings=settings, http=http or owned_http, app=firebase_app
        )
        app.state.firestore = firestore or create_firestore_client(firebase_app, settings)
        try:
            yield
        finally:
            if owned_http is not None:
                await owned_http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Classroom API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(users_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; platform calls stay
# in services and the firebase/db boundaries.
