"""
classroom_api.db.repositories.classes

Repository helpers for the `classes` Firestore collection.

Responsibilities:
- Build class document references from ids (stored on user documents).
- Resolve a stored reference into the class document's data.
"""

from __future__ import annotations

from typing import Any

from google.cloud.firestore import AsyncClient, AsyncDocumentReference


class ClassRepo:
    def __init__(self, db: AsyncClient, *, collection: str = "classes") -> None:
        self._col = db.collection(collection)

    def ref(self, class_id: str) -> AsyncDocumentReference:
        return self._col.document(class_id)

    async def resolve(self, ref: AsyncDocumentReference) -> dict[str, Any] | None:
        # Missing class documents resolve to None rather than failing the user read.
        snapshot = await ref.get()
        return snapshot.to_dict()


# --- Module Notes -----------------------------------------------------------
# Class documents are schemaless and returned verbatim; this service never writes them.
