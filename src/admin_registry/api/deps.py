"""
admin_registry.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the registry service.
- Encapsulate app.state access patterns (settings/sessionmaker/registry lock).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_registry.services.registry_service import AdminRegistryService
from admin_registry.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app is built around one Settings instance (see `api.app.create_app`).
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed by the service layer.
    async with session_factory() as session:
        yield session


def registry_service(
    request: Request,
    session: AsyncSession = Depends(db_session),
) -> AdminRegistryService:
    return AdminRegistryService(session=session, lock=request.app.state.registry_lock)


# --- Module Notes -----------------------------------------------------------
# `registry_lock` is created once per app so concurrent requests serialize their
# registry mutations.
