"""
classroom_api.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with Firestore connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from classroom_api.api.deps import user_repo
from classroom_api.db.repositories.users import UserRepo

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(users: UserRepo = Depends(user_repo)) -> dict[str, str]:
    # Readiness: one-document read proves credentials and Firestore reachability.
    await users.ping()
    return {"status": "ready"}
