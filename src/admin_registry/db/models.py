"""
admin_registry.db.models

Persistence schema for the admin registry.

Responsibilities:
- Administrator: one row per admin identity (the admin set).
- RegistryCounter: single-slot named counters; holds the admin count.
- AuditEvent: append-only trail of accepted mutations.
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, Index, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from admin_registry.db.base import Base
from admin_registry.registry.core import IDENTITY_MAX_LENGTH

ADMIN_COUNT = "admin-count"


def _utcnow() -> datetime:
    # Naive UTC timestamps; SQLite has no tz-aware column type.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class AuditEventType(enum.StrEnum):
    # Stored in DB; treat as stable API contract.
    admin_initialized = "ADMIN_INITIALIZED"
    admin_added = "ADMIN_ADDED"
    admin_removed = "ADMIN_REMOVED"


class Administrator(Base):
    __tablename__ = "administrators"

    identity: Mapped[str] = mapped_column(String(IDENTITY_MAX_LENGTH), primary_key=True)
    added_by: Mapped[str] = mapped_column(String(IDENTITY_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class RegistryCounter(Base):
    __tablename__ = "registry_counters"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[int] = mapped_column(nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)


class AuditEvent(Base):
    __tablename__ = "audit_events"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    actor: Mapped[str] = mapped_column(String(IDENTITY_MAX_LENGTH), nullable=False)
    event_type: Mapped[AuditEventType] = mapped_column(
        Enum(AuditEventType), nullable=False, index=True
    )
    target: Mapped[str] = mapped_column(String(IDENTITY_MAX_LENGTH), nullable=False, index=True)
    admin_count: Mapped[int] = mapped_column(nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, index=True)

    __table_args__ = (Index("ix_audit_target_created", "target", "created_at"),)


# --- Module Notes -----------------------------------------------------------
# Membership is row presence; there is no boolean column that could be false.
