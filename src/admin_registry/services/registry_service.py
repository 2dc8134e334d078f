"""
admin_registry.services.registry_service

Registry service (transaction + persistence owner).

Responsibilities:
- Load the persisted admin set and counter as one `RegistryState`.
- Run a pure transition from `registry.core` and persist the result, set and
  counter together, in a single transaction.
- Append audit events for accepted mutations; log rejections.
- Serialize mutations so each operation is one indivisible step.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from admin_registry.db.models import AuditEvent, AuditEventType
from admin_registry.db.repositories.admins import AdminRepo
from admin_registry.db.repositories.audit import AuditRepo
from admin_registry.observability.logging import get_logger
from admin_registry.registry import core
from admin_registry.registry.core import Identity, RegistryState, Transition
from admin_registry.registry.errors import Err, ErrorCode, RegistryCorrupted, RegistryRejected

log = get_logger(__name__)


class AdminRegistryService:
    def __init__(self, *, session: AsyncSession, lock: asyncio.Lock | None = None) -> None:
        self._session = session
        # Share one lock per process (see `api.app`); a private lock only
        # serializes calls made through this instance.
        self._lock = lock or asyncio.Lock()

        self._admins = AdminRepo(session)
        self._audit = AuditRepo(session)

    # -- queries ----------------------------------------------------------

    async def is_admin(self, identity: Identity) -> bool:
        return await self._admins.is_member(identity)

    async def admin_count(self) -> int:
        return await self._admins.get_count()

    async def snapshot(self) -> RegistryState:
        """
        Admin set and count as one consistent state (no mutation can interleave).
        """

        async with self._lock:
            return await self._load(for_update=False)

    async def audit_trail(self, *, caller: Identity, limit: int = 200) -> list[AuditEvent]:
        if not await self._admins.is_member(caller):
            log.warning(
                "registry_rejected",
                operation="audit_trail",
                caller=caller,
                code=int(ErrorCode.FORBIDDEN),
            )
            raise RegistryRejected(ErrorCode.FORBIDDEN, operation="audit_trail")
        return await self._audit.list_recent(limit=limit)

    # -- mutations --------------------------------------------------------

    async def initialize(self, *, caller: Identity) -> int:
        return await self._mutate(
            operation="initialize",
            caller=caller,
            target=caller,
            event_type=AuditEventType.admin_initialized,
            conflict=ErrorCode.ALREADY_INITIALIZED,
            step=lambda state: core.initialize(state, caller=caller),
        )

    async def add_admin(self, *, caller: Identity, target: Identity) -> int:
        return await self._mutate(
            operation="add_admin",
            caller=caller,
            target=target,
            event_type=AuditEventType.admin_added,
            conflict=ErrorCode.ALREADY_ADMIN,
            step=lambda state: core.add_admin(state, caller=caller, target=target),
        )

    async def remove_admin(self, *, caller: Identity, target: Identity) -> int:
        return await self._mutate(
            operation="remove_admin",
            caller=caller,
            target=target,
            event_type=AuditEventType.admin_removed,
            step=lambda state: core.remove_admin(state, caller=caller, target=target),
        )

    async def _mutate(
        self,
        *,
        operation: str,
        caller: Identity,
        target: Identity,
        event_type: AuditEventType,
        step: Callable[[RegistryState], Transition],
        conflict: ErrorCode | None = None,
    ) -> int:
        """
        Run one check-then-mutate step and return the admin count after it.
        Raises `RegistryRejected` when a precondition fails; nothing is written.

        `conflict` is the rejection reported when another writer commits the same
        rows first (a unique-key violation on flush/commit).
        """

        async with self._lock:
            try:
                before = await self._load(for_update=True)
                t = step(before)
                if isinstance(t.result, Err):
                    log.warning(
                        "registry_rejected",
                        operation=operation,
                        caller=caller,
                        target=target,
                        code=int(t.result.code),
                    )
                    raise RegistryRejected(t.result.code, operation=operation)

                await self._persist(before=before, after=t.state, actor=caller)
                await self._audit.add(
                    actor=caller,
                    event_type=event_type,
                    target=target,
                    admin_count=t.state.admin_count,
                )
                await self._session.commit()
            except IntegrityError as e:
                await self._session.rollback()
                if conflict is None:
                    raise
                log.warning(
                    "registry_rejected",
                    operation=operation,
                    caller=caller,
                    target=target,
                    code=int(conflict),
                    reason="concurrent_write",
                )
                raise RegistryRejected(conflict, operation=operation) from e
            except Exception:
                await self._session.rollback()
                raise

        log.info(
            event_type.value.lower(),
            caller=caller,
            target=target,
            admin_count=t.state.admin_count,
        )
        return t.state.admin_count

    async def _load(self, *, for_update: bool) -> RegistryState:
        # Lock the counter row first; every mutation writes it. `init_db` seeds the
        # row so there is something to lock even at genesis.
        count = await self._admins.get_count(for_update=for_update)
        identities = await self._admins.list_identities(for_update=for_update)
        try:
            return RegistryState.restore(admins=identities, admin_count=count)
        except RegistryCorrupted as e:
            log.error("registry_corrupted", admin_count=e.admin_count, members=e.members)
            raise

    async def _persist(self, *, before: RegistryState, after: RegistryState, actor: Identity) -> None:
        for identity in sorted(after.admins - before.admins):
            await self._admins.insert(identity, added_by=actor)
        for identity in sorted(before.admins - after.admins):
            await self._admins.delete(identity)
        await self._admins.set_count(after.admin_count)
        await self._session.flush()


# --- Module Notes -----------------------------------------------------------
# The asyncio lock covers a single process. Across processes, `with_for_update`
# on the seeded counter row serializes writers on backends that support it
# (PostgreSQL); SQLite serializes writers at the database level. A unique-key
# violation that still slips through is reported as the operation's 409.
