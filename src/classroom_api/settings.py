"""
classroom_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., the Firebase web API key).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration; defaults are safe for local dev against the Firebase emulators.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSROOM_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Environment controls toggle behavior like the dev-only custom token endpoint.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "classroom-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Firebase Admin SDK. Without a credentials file, Application Default Credentials are used.
    firebase_credentials_file: str | None = None
    firebase_project_id: str | None = None
    firebase_app_name: str = "classroom-api"
    firestore_database: str | None = None

    # Identity Toolkit REST API (custom token -> ID token exchange)
    firebase_api_key: str = Field(default="", repr=False)
    identity_toolkit_url: str = "https://identitytoolkit.googleapis.com/v1"
    http_timeout_seconds: float = 10.0

    # Document layout and access control
    users_collection: str = "users"
    classes_collection: str = "classes"
    check_revoked: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every other module depends on this one; keep field names stable since they map to env vars.
