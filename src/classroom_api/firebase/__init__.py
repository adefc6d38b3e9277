"""
classroom_api.firebase

Firebase platform boundary.

Responsibilities:
- Initialize the Firebase Admin app once per process.
- Wrap the identity provider (Firebase Authentication) behind an async client.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on this boundary, never on `firebase_admin.auth` directly.
