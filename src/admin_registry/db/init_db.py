"""
admin_registry.db.init_db

DB initialization helpers (dev/test convenience).
"""

from __future__ import annotations

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from admin_registry.db.base import Base
from admin_registry.db.models import ADMIN_COUNT, RegistryCounter


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist and seed the genesis admin counter.
    Safe to call on every startup.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await seed_counters(conn)


async def seed_counters(conn: AsyncConnection) -> None:
    # The counter row must exist before the first initialize so writers in other
    # processes have a row to lock with SELECT ... FOR UPDATE.
    existing = await conn.execute(
        select(RegistryCounter.name).where(RegistryCounter.name == ADMIN_COUNT)
    )
    if existing.first() is None:
        await conn.execute(insert(RegistryCounter).values(name=ADMIN_COUNT, value=0))


# --- Module Notes -----------------------------------------------------------
# Production deployments run alembic migrations instead (see `alembic/env.py`);
# a migration creating `registry_counters` must insert the same seed row.
