"""
tests.conftest

Shared fixtures: throwaway SQLite databases, sessions, and an in-process API client.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_registry.api.app import create_app
from admin_registry.auth.jwt import JwtConfig, issue_token
from admin_registry.db.init_db import init_db
from admin_registry.db.session import create_engine, create_sessionmaker
from admin_registry.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}",
        jwt_secret="test-secret-that-is-long-enough-for-hs256",
    )


@pytest_asyncio.fixture
async def session_factory(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest.fixture
def registry_lock() -> asyncio.Lock:
    return asyncio.Lock()


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest.fixture
def auth(settings: Settings) -> Callable[[str], dict[str, str]]:
    cfg = JwtConfig.from_settings(settings)

    def _headers(subject: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {issue_token(cfg=cfg, subject=subject)}"}

    return _headers
