"""
admin_registry.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated caller type injected into endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Caller:
    """
    Identity attempting the current operation (the token subject).
    """

    identity: str


# --- Module Notes -----------------------------------------------------------
# Admin status is deliberately not a field here: it changes with registry state and
# is always read from the registry at operation time.
