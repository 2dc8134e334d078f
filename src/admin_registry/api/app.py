"""
admin_registry.api.app

FastAPI app factory for the Admin Registry service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory,
  registry lock).
- Map registry rejections to HTTP responses.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from admin_registry import __version__
from admin_registry.api.routers.admins import router as admins_router
from admin_registry.api.routers.audit import router as audit_router
from admin_registry.api.routers.dev_auth import router as dev_auth_router
from admin_registry.api.routers.health import router as health_router
from admin_registry.db.init_db import init_db
from admin_registry.db.session import create_engine, create_sessionmaker
from admin_registry.observability.logging import configure_logging, get_logger
from admin_registry.observability.middleware import RequestContextMiddleware
from admin_registry.registry.errors import RegistryCorrupted, RegistryRejected, describe
from admin_registry.settings import Settings

log = get_logger(__name__)


async def _on_rejected(_: Request, exc: RegistryRejected) -> JSONResponse:
    return JSONResponse(
        status_code=int(exc.code),
        content={"detail": describe(exc.code), "code": int(exc.code), "error": exc.error},
    )


async def _on_corrupted(_: Request, exc: RegistryCorrupted) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Registry state is inconsistent"},
    )


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        cache_loggers=settings.env != "test",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Admin Registry",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry_lock = asyncio.Lock()

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(RegistryRejected, _on_rejected)
    app.add_exception_handler(RegistryCorrupted, _on_corrupted)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(admins_router)
    app.include_router(audit_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Composition only; registry rules live in `registry.core` and transactions in
# `services.registry_service`.
