"""
admin_registry.registry

Admin allowlist domain package.

Responsibilities:
- Pure state transitions (`core`), result/error types (`errors`).
- An in-process, lock-serialized registry holder (`memory`).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# This package has no database or HTTP dependencies.
