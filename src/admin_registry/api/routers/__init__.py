"""
admin_registry.api.routers

HTTP routers: health probes, dev token minting, and the admin allowlist.
"""

# Package marker.
