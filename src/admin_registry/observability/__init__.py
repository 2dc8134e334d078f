"""
admin_registry.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Registry mutations are logged by the service layer; the audit table is the
# durable record.
