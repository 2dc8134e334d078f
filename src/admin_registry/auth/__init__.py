"""
admin_registry.auth

Caller authentication package.

Responsibilities:
- JWT helpers and validation.
- FastAPI dependency that resolves the ambient caller identity.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Authorization (who may mutate the allowlist) is decided by the registry itself,
# not by token claims.
