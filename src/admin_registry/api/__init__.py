"""
admin_registry.api

API package for the Admin Registry service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request validation + caller resolution + delegation
# to `services.registry_service`.
