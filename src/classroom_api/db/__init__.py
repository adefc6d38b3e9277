"""
classroom_api.db

Persistence package (Cloud Firestore).

Responsibilities:
- Firestore async client construction.
- Repositories over the `users` and `classes` collections.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Firestore owns all state and consistency; nothing here caches or locks.
