"""
classroom_api.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) injected into endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Caller identity decoded from a verified Firebase ID token.
    """

    uid: str
    email: str | None = None
    role: str | None = None
    claims: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> Principal:
        uid = str(claims.get("uid") or claims.get("sub") or "").strip()
        role = claims.get("role")
        return cls(
            uid=uid,
            email=claims.get("email"),
            role=str(role) if role is not None else None,
            claims=claims,
        )


# --- Module Notes -----------------------------------------------------------
# `role` is the custom claim written by AuthService; it is None for users that never had one.
