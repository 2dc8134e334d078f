"""
admin_registry.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Bridge the pure registry core and the database repositories.
"""

# Package marker.
