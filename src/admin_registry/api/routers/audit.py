"""
admin_registry.api.routers.audit

Audit trail endpoint (admins only).
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from admin_registry.api.deps import registry_service, settings_dep
from admin_registry.auth.deps import get_caller
from admin_registry.auth.models import Caller
from admin_registry.services.registry_service import AdminRegistryService
from admin_registry.settings import Settings

router = APIRouter(prefix="/v1/audit", tags=["audit"])


class AuditEventResponse(BaseModel):
    id: str
    actor: str
    event_type: str
    target: str
    admin_count: int
    created_at: datetime


@router.get("", response_model=list[AuditEventResponse])
async def audit_trail(
    limit: int | None = Query(default=None, ge=1, le=1000),
    caller: Caller = Depends(get_caller),
    svc: AdminRegistryService = Depends(registry_service),
    settings: Settings = Depends(settings_dep),
) -> list[AuditEventResponse]:
    # Newest first; `limit` keeps the most recent events.
    events = await svc.audit_trail(caller=caller.identity, limit=limit or settings.audit_page_size)
    return [
        AuditEventResponse(
            id=str(e.id),
            actor=e.actor,
            event_type=e.event_type.value,
            target=e.target,
            admin_count=e.admin_count,
            created_at=e.created_at,
        )
        for e in events
    ]
