"""
classroom_api.api

API package for the classroom backend.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error handlers and request models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + guards + delegation to services.
