"""
classroom_api.db.repositories.users

Repository helpers for the `users` Firestore collection.

Responsibilities:
- Read, write, update and delete `users/{uid}` documents.
- Stream the collection for listing.
- Provide a one-document read for readiness checks.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from google.cloud.firestore import AsyncClient, AsyncDocumentReference, DocumentSnapshot

# Firestore field holding the reference to the user's class document.
CLASS_FIELD = "class"


class UserRepo:
    def __init__(self, db: AsyncClient, *, collection: str = "users") -> None:
        self._col = db.collection(collection)

    def ref(self, uid: str) -> AsyncDocumentReference:
        return self._col.document(uid)

    async def get(self, uid: str) -> DocumentSnapshot:
        return await self.ref(uid).get()

    async def create(
        self,
        uid: str,
        *,
        email: str,
        name: str,
        role: str,
        class_ref: AsyncDocumentReference,
    ) -> None:
        await self.ref(uid).set(
            {"email": email, "name": name, "role": role, CLASS_FIELD: class_ref}
        )

    async def update(self, uid: str, fields: dict[str, Any]) -> None:
        # Firestore rejects updates on missing documents (NotFound).
        await self.ref(uid).update(fields)

    async def delete(self, uid: str) -> None:
        await self.ref(uid).delete()

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        async for snapshot in self._col.stream():
            yield snapshot

    async def ping(self) -> None:
        async for _ in self._col.limit(1).stream():
            break


# --- Module Notes -----------------------------------------------------------
# The repo stores the class as a DocumentReference; expanding it into the class
# document's data is the service layer's job (see `ClassRepo.resolve`).
