"""
classroom_api.db.client

Firestore async client factory.

Responsibilities:
- Build the `google.cloud.firestore.AsyncClient` bound to the service's Firebase app.
"""

from __future__ import annotations

import firebase_admin
from firebase_admin import firestore_async
from google.cloud.firestore import AsyncClient

from classroom_api.settings import Settings


def create_firestore_client(app: firebase_admin.App, settings: Settings) -> AsyncClient:
    # The SDK caches one client per (app, database) pair.
    return firestore_async.client(app=app, database_id=settings.firestore_database)


# --- Module Notes -----------------------------------------------------------
# Honors FIRESTORE_EMULATOR_HOST for local development.
