"""Repository for vault audit events."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from vault_core.db.models import AuditEventRecord


class AuditRepository:
    def record(
        self,
        *,
        action: str,
        actor: str,
        target_id: Any,
        logical_time: int,
        tier: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        session: Session,
    ) -> AuditEventRecord:
        event = AuditEventRecord(
            action=action,
            actor=actor,
            tier=tier,
            target_id=str(target_id),
            logical_time=logical_time,
            details=dict(details) if details else None,
        )
        session.add(event)
        return event

    def list_events(
        self,
        *,
        action: Optional[str] = None,
        target_id: Optional[Any] = None,
        session: Session,
    ) -> list[AuditEventRecord]:
        stmt = select(AuditEventRecord)
        if action:
            stmt = stmt.where(AuditEventRecord.action == action)
        if target_id is not None:
            stmt = stmt.where(AuditEventRecord.target_id == str(target_id))
        stmt = stmt.order_by(AuditEventRecord.logical_time, AuditEventRecord.created_at)
        return list(session.execute(stmt).scalars().all())
