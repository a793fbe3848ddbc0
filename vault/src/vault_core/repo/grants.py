"""Repository for permission grants."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from vault_core.db.models import PermissionGrantRecord


class GrantRepository:
    def get(self, *, entry_id: int, grantee: str, session: Session) -> Optional[PermissionGrantRecord]:
        return session.get(PermissionGrantRecord, (entry_id, grantee))

    def upsert(
        self,
        *,
        entry_id: int,
        grantee: str,
        privilege_level: str,
        granted_at: int,
        expires_at: int,
        modification_rights: bool,
        granted_by: Optional[str],
        session: Session,
    ) -> PermissionGrantRecord:
        existing = self.get(entry_id=entry_id, grantee=grantee, session=session)
        if existing:
            existing.privilege_level = privilege_level
            existing.granted_at = granted_at
            existing.expires_at = expires_at
            existing.modification_rights = modification_rights
            existing.granted_by = granted_by
            session.add(existing)
            session.flush()
            return existing
        record = PermissionGrantRecord(
            entry_id=entry_id,
            grantee=grantee,
            privilege_level=privilege_level,
            granted_at=granted_at,
            expires_at=expires_at,
            modification_rights=modification_rights,
            granted_by=granted_by,
        )
        session.add(record)
        session.flush()
        return record
