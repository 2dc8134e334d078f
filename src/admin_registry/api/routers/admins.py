"""
admin_registry.api.routers.admins

Admin allowlist endpoints.

Responsibilities:
- Public `is-admin` query.
- Caller-authenticated initialize / add-admin / remove-admin.
- Admin listing for operators.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from admin_registry.api.deps import registry_service
from admin_registry.auth.deps import get_caller
from admin_registry.auth.models import Caller
from admin_registry.registry.core import IDENTITY_MAX_LENGTH
from admin_registry.services.registry_service import AdminRegistryService

router = APIRouter(prefix="/v1/admins", tags=["admins"])


class AddAdminRequest(BaseModel):
    identity: str = Field(min_length=1, max_length=IDENTITY_MAX_LENGTH)


class MutationResponse(BaseModel):
    ok: bool = True
    admin_count: int


class IsAdminResponse(BaseModel):
    identity: str
    is_admin: bool


class AdminListResponse(BaseModel):
    admins: list[str]
    admin_count: int


@router.get("", response_model=AdminListResponse)
async def list_admins(
    _: Caller = Depends(get_caller),
    svc: AdminRegistryService = Depends(registry_service),
) -> AdminListResponse:
    state = await svc.snapshot()
    return AdminListResponse(admins=sorted(state.admins), admin_count=state.admin_count)


@router.post("/initialize", response_model=MutationResponse)
async def initialize(
    caller: Caller = Depends(get_caller),
    svc: AdminRegistryService = Depends(registry_service),
) -> MutationResponse:
    # First caller wins; there is intentionally no check on who that is.
    count = await svc.initialize(caller=caller.identity)
    return MutationResponse(admin_count=count)


@router.post("", response_model=MutationResponse)
async def add_admin(
    body: AddAdminRequest,
    caller: Caller = Depends(get_caller),
    svc: AdminRegistryService = Depends(registry_service),
) -> MutationResponse:
    count = await svc.add_admin(caller=caller.identity, target=body.identity)
    return MutationResponse(admin_count=count)


# `:path` keeps identities containing "/" addressable.
@router.get("/{identity:path}", response_model=IsAdminResponse)
async def is_admin(
    identity: str,
    svc: AdminRegistryService = Depends(registry_service),
) -> IsAdminResponse:
    return IsAdminResponse(identity=identity, is_admin=await svc.is_admin(identity))


@router.delete("/{identity:path}", response_model=MutationResponse)
async def remove_admin(
    identity: str,
    caller: Caller = Depends(get_caller),
    svc: AdminRegistryService = Depends(registry_service),
) -> MutationResponse:
    count = await svc.remove_admin(caller=caller.identity, target=identity)
    return MutationResponse(admin_count=count)


# --- Module Notes -----------------------------------------------------------
# Rejections surface as `RegistryRejected` and are rendered by the handler in
# `api.app`, with the HTTP status equal to the registry error code. Nothing else
# may be mounted under `/v1/admins/`: every sub-path there is an identity.
