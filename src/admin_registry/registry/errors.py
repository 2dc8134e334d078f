"""
admin_registry.registry.errors

Error codes and result values for registry operations.

Responsibilities:
- Define the stable numeric error codes that form the public contract.
- Define the tagged `Ok` / `Err` result values returned by the core.
- Define exceptions used above the core (service/API layers).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ErrorCode(enum.IntEnum):
    # Numeric values are part of the public contract; never renumber.
    FORBIDDEN = 403
    NOT_ADMIN = 404
    ALREADY_ADMIN = 409
    LAST_ADMIN = 400

    # Same wire value as ALREADY_ADMIN; IntEnum makes this an alias.
    ALREADY_INITIALIZED = 409


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FORBIDDEN: "Caller is not an admin",
    ErrorCode.NOT_ADMIN: "Target is not an admin",
    ErrorCode.ALREADY_ADMIN: "Conflicting existing state",
    ErrorCode.LAST_ADMIN: "Cannot remove the last admin",
}


def describe(code: ErrorCode) -> str:
    return _MESSAGES[code]


@dataclass(frozen=True, slots=True)
class Ok:
    value: bool = True

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    code: ErrorCode

    @property
    def is_ok(self) -> bool:
        return False


Result = Ok | Err


class RegistryError(Exception):
    pass


class RegistryRejected(RegistryError):
    """
    An operation was refused by a registry precondition.
    Raised by the service layer so the API can map `code` to an HTTP status.
    """

    def __init__(self, code: ErrorCode, *, operation: str) -> None:
        super().__init__(f"{operation}: {describe(code)} ({int(code)})")
        self.code = code
        self.operation = operation

    @property
    def error(self) -> str:
        if self.code == ErrorCode.ALREADY_INITIALIZED and self.operation == "initialize":
            return "ALREADY_INITIALIZED"
        return self.code.name


class RegistryCorrupted(RegistryError):
    """
    Persisted admin count disagrees with the persisted admin set.
    """

    def __init__(self, *, admin_count: int, members: int) -> None:
        super().__init__(f"admin count {admin_count} does not match {members} admin rows")
        self.admin_count = admin_count
        self.members = members


# --- Module Notes -----------------------------------------------------------
# ALREADY_ADMIN and ALREADY_INITIALIZED share code 409, so `ErrorCode(409).name`
# is "ALREADY_ADMIN"; callers that need the operation context use
# `RegistryRejected.operation`.
