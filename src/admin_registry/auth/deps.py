"""
admin_registry.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a typed `Caller`.
- Bind the caller identity into the structlog context.
"""

from __future__ import annotations

import structlog
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from admin_registry.api.deps import settings_dep
from admin_registry.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from admin_registry.auth.models import Caller
from admin_registry.registry.core import IDENTITY_MAX_LENGTH
from admin_registry.settings import Settings

_bearer = HTTPBearer(auto_error=False)


# Async so the contextvars binding happens in the request's own context; sync
# dependencies run in a threadpool on a copied context.
async def get_caller(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> Caller:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    try:
        payload = decode_and_validate(cfg=JwtConfig.from_settings(settings), token=creds.credentials)
    except JwtValidationError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}") from e

    identity = payload.get("sub")
    if not isinstance(identity, str) or not identity or len(identity) > IDENTITY_MAX_LENGTH:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token subject")

    structlog.contextvars.bind_contextvars(caller=identity)
    return Caller(identity=identity)


# --- Module Notes -----------------------------------------------------------
# `is-admin` is a public query and does not use this dependency.
