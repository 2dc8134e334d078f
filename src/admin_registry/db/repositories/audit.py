"""
admin_registry.db.repositories.audit

Repository for `AuditEvent` entities.

Responsibilities:
- Append audit events for accepted registry mutations.
- Query the audit trail, newest first.
"""

from __future__ import annotations

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_registry.db.models import AuditEvent, AuditEventType


class AuditRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(
        self,
        *,
        actor: str,
        event_type: AuditEventType,
        target: str,
        admin_count: int,
    ) -> AuditEvent:
        # Audit events are append-only (no update/delete) in normal operation.
        ev = AuditEvent(
            actor=actor,
            event_type=event_type,
            target=target,
            admin_count=admin_count,
        )
        self._session.add(ev)
        await self._session.flush()
        return ev

    async def list_recent(self, *, limit: int = 200) -> list[AuditEvent]:
        stmt = select(AuditEvent).order_by(desc(AuditEvent.created_at)).limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())


# --- Module Notes -----------------------------------------------------------
# Rejected operations are logged but never audited here; they change nothing.
