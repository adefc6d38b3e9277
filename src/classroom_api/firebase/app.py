"""
classroom_api.firebase.app

Firebase Admin SDK initialization.

Responsibilities:
- Initialize a named Firebase Admin app exactly once per process.
- Pick credentials: a service-account file when configured, ADC otherwise.
"""

from __future__ import annotations

import threading

import firebase_admin
import google.auth.exceptions
from firebase_admin import credentials

from classroom_api.observability.logging import get_logger
from classroom_api.settings import Settings

log = get_logger(__name__)

_init_lock = threading.Lock()


def _credential(settings: Settings) -> credentials.Base:
    if settings.firebase_credentials_file:
        return credentials.Certificate(settings.firebase_credentials_file)
    # ApplicationDefault defers the lookup until first use; load it here so a
    # missing credential fails at startup, before an app is registered.
    cred = credentials.ApplicationDefault()
    try:
        cred.get_credential()
    except google.auth.exceptions.DefaultCredentialsError as e:
        raise RuntimeError(
            "Failed to load Application Default Credentials for Firebase Admin SDK. "
            "Set CLASSROOM_FIREBASE_CREDENTIALS_FILE to a service-account JSON, or run "
            "`gcloud auth application-default login`."
        ) from e
    return cred


def init_firebase_app(settings: Settings) -> firebase_admin.App:
    """
    Return the service's Firebase Admin app, initializing it on first use.
    """
    name = settings.firebase_app_name
    with _init_lock:
        try:
            return firebase_admin.get_app(name)
        except ValueError:
            pass

        options: dict[str, str] = {}
        if settings.firebase_project_id:
            options["projectId"] = settings.firebase_project_id

        app = firebase_admin.initialize_app(_credential(settings), options, name=name)
        log.info(
            "firebase_initialized",
            app_name=name,
            project_id=app.project_id,
            credentials_file=bool(settings.firebase_credentials_file),
        )
        return app


# --- Module Notes -----------------------------------------------------------
# A named app (rather than the default one) keeps this service isolated from any other
# code in the same process that calls `firebase_admin.initialize_app()` itself.
