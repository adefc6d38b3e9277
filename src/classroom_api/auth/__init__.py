"""
classroom_api.auth

Authentication/authorization package.

Responsibilities:
- The authenticated identity type (`Principal`).
- FastAPI auth dependencies: bearer token guard + role guard.
"""

# Package marker.
