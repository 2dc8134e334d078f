"""
admin_registry.db.repositories.admins

Repository for the admin set and the admin counter.

Responsibilities:
- Membership lookups and listing for `Administrator` rows.
- Read/write the single-slot admin counter.
- Insert/delete admin rows (the service pairs these with counter writes).
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_registry.db.models import ADMIN_COUNT, Administrator, RegistryCounter


class AdminRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def is_member(self, identity: str) -> bool:
        return await self._session.get(Administrator, identity) is not None

    async def list_identities(self, *, for_update: bool = False) -> list[str]:
        stmt = select(Administrator.identity).order_by(Administrator.identity)
        if for_update:
            stmt = stmt.with_for_update()
        return list((await self._session.execute(stmt)).scalars().all())

    async def get_count(self, *, for_update: bool = False) -> int:
        # A missing counter row is the genesis state.
        counter = await self._session.get(RegistryCounter, ADMIN_COUNT, with_for_update=for_update)
        return 0 if counter is None else counter.value

    async def set_count(self, value: int) -> None:
        counter = await self._session.get(RegistryCounter, ADMIN_COUNT)
        if counter is None:
            self._session.add(RegistryCounter(name=ADMIN_COUNT, value=value))
        else:
            counter.value = value

    async def insert(self, identity: str, *, added_by: str) -> None:
        self._session.add(Administrator(identity=identity, added_by=added_by))

    async def delete(self, identity: str) -> None:
        await self._session.execute(delete(Administrator).where(Administrator.identity == identity))


# --- Module Notes -----------------------------------------------------------
# No method here commits. Callers flush/commit inside one transaction so the set
# and the counter never diverge on disk.
