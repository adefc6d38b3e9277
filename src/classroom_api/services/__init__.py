"""
classroom_api.services

Service-layer package.

Responsibilities:
- One async method per operation, each a short chain of platform calls.
- Validate presence of inputs and map provider failures to `ApiError`s.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are plain Python and are tested with in-memory fakes of the platform boundary.
