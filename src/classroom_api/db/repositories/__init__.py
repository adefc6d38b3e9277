"""
classroom_api.db.repositories

Repository package.

Responsibilities:
- Group document-access repositories for the persistence layer.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; error mapping belongs in services.
