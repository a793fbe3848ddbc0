"""ORM model for vault audit events."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import JSON, BigInteger, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _uuid() -> str:
    return str(uuid4())


class AuditEventRecord(Base):
    __tablename__ = "vault_audit_events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    action: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    actor: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    tier: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    target_id: Mapped[str] = mapped_column(String(128), nullable=False)
    logical_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    details: Mapped[Optional[dict[str, object]]] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
