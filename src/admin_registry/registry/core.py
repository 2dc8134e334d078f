"""
admin_registry.registry.core

Pure state transitions for the admin allowlist.

Responsibilities:
- Model the registry as an immutable `RegistryState` (admin set + admin count).
- Implement is-admin / initialize / add-admin / remove-admin as functions from
  (state, caller, target) to (result, next state).
- Guarantee every mutation replaces set and count together.

Rules:
- Only current admins may add or remove admins.
- `initialize` succeeds exactly once, for whoever calls it first.
- The registry never drops below one admin after bootstrap.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from admin_registry.registry.errors import Err, ErrorCode, Ok, RegistryCorrupted, Result

Identity = str

# Matches the `administrators.identity` column width.
IDENTITY_MAX_LENGTH = 256


@dataclass(frozen=True, slots=True)
class RegistryState:
    admins: frozenset[Identity] = frozenset()
    admin_count: int = 0

    @classmethod
    def genesis(cls) -> RegistryState:
        return cls()

    @classmethod
    def restore(cls, *, admins: Iterable[Identity], admin_count: int) -> RegistryState:
        """
        Rebuild a state from persisted values, rejecting a counter that does not
        mirror the set.
        """

        members = frozenset(admins)
        if admin_count != len(members):
            raise RegistryCorrupted(admin_count=admin_count, members=len(members))
        return cls(admins=members, admin_count=admin_count)

    @property
    def initialized(self) -> bool:
        return self.admin_count != 0


@dataclass(frozen=True, slots=True)
class Transition:
    result: Result
    state: RegistryState

    @property
    def changed(self) -> bool:
        return isinstance(self.result, Ok)


def _commit(admins: frozenset[Identity]) -> RegistryState:
    # The only constructor of post-mutation states: count always derives from the set.
    return RegistryState(admins=admins, admin_count=len(admins))


def _reject(state: RegistryState, code: ErrorCode) -> Transition:
    return Transition(result=Err(code), state=state)


def is_admin(state: RegistryState, identity: Identity) -> bool:
    return identity in state.admins


def initialize(state: RegistryState, *, caller: Identity) -> Transition:
    if state.admin_count != 0:
        return _reject(state, ErrorCode.ALREADY_INITIALIZED)
    return Transition(result=Ok(True), state=_commit(frozenset({caller})))


def add_admin(state: RegistryState, *, caller: Identity, target: Identity) -> Transition:
    if not is_admin(state, caller):
        return _reject(state, ErrorCode.FORBIDDEN)
    if is_admin(state, target):
        return _reject(state, ErrorCode.ALREADY_ADMIN)
    return Transition(result=Ok(True), state=_commit(state.admins | {target}))


def remove_admin(state: RegistryState, *, caller: Identity, target: Identity) -> Transition:
    if not is_admin(state, caller):
        return _reject(state, ErrorCode.FORBIDDEN)
    if not is_admin(state, target):
        return _reject(state, ErrorCode.NOT_ADMIN)
    # Quorum floor: applies even when an admin removes itself.
    if state.admin_count <= 1:
        return _reject(state, ErrorCode.LAST_ADMIN)
    return Transition(result=Ok(True), state=_commit(state.admins - {target}))


# --- Module Notes -----------------------------------------------------------
# Nothing here performs I/O. Storage adapters (`registry.memory`, the SQL service)
# load a state, call one of these functions, and persist `Transition.state` only
# when `Transition.changed` is true.
