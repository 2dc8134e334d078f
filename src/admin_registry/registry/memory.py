"""
admin_registry.registry.memory

In-process registry holder around the pure core.

Responsibilities:
- Hold the current `RegistryState` for embedding and tests.
- Serialize operations with a lock so each one is a single atomic step.
"""

from __future__ import annotations

import threading

from admin_registry.observability.logging import get_logger
from admin_registry.registry import core
from admin_registry.registry.core import Identity, RegistryState, Transition
from admin_registry.registry.errors import Err, Result

log = get_logger(__name__)


class InMemoryAdminRegistry:
    def __init__(self, state: RegistryState | None = None) -> None:
        self._state = state or RegistryState.genesis()
        self._lock = threading.Lock()

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def admin_count(self) -> int:
        return self._state.admin_count

    def list_admins(self) -> list[Identity]:
        return sorted(self._state.admins)

    def is_admin(self, identity: Identity) -> bool:
        return core.is_admin(self._state, identity)

    def initialize(self, *, caller: Identity) -> Result:
        with self._lock:
            return self._apply("initialize", core.initialize(self._state, caller=caller), caller)

    def add_admin(self, *, caller: Identity, target: Identity) -> Result:
        with self._lock:
            t = core.add_admin(self._state, caller=caller, target=target)
            return self._apply("add_admin", t, caller, target)

    def remove_admin(self, *, caller: Identity, target: Identity) -> Result:
        with self._lock:
            t = core.remove_admin(self._state, caller=caller, target=target)
            return self._apply("remove_admin", t, caller, target)

    def _apply(
        self, operation: str, t: Transition, caller: Identity, target: Identity | None = None
    ) -> Result:
        # Single assignment swaps set and count together.
        if t.changed:
            self._state = t.state
        elif isinstance(t.result, Err):
            log.debug(
                "registry_rejected",
                operation=operation,
                caller=caller,
                target=target,
                code=int(t.result.code),
            )
        return t.result


# --- Module Notes -----------------------------------------------------------
# The SQL-backed path lives in `services.registry_service`; both delegate every
# decision to `registry.core`.
