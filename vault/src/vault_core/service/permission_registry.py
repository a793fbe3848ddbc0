"""Service layer for time-bounded permission grants."""

from __future__ import annotations

import logging
from typing import Optional

from vault_core.config import get_settings
from vault_core.context import Context
from vault_core.db.session import run_in_session
from vault_core.domain.models import PermissionGrant, PrivilegeLevel, StorageTier
from vault_core.errors import AccessForbidden, RecordNotFound
from vault_core.repo.audit import AuditRepository
from vault_core.repo.grants import GrantRepository
from vault_core.repo.records import RecordRepository
from vault_core.validation import parse_privilege_level, validate_duration, validate_grantee

LOGGER = logging.getLogger(__name__)


class PermissionRegistry:
    """Grants keyed by (entry id, grantee) over primary-tier records.

    Grants are never removed; an expired grant stays stored and readers
    compare ``expires_at`` against their own logical time.
    """

    def __init__(
        self,
        *,
        grants: Optional[GrantRepository] = None,
        records: Optional[RecordRepository] = None,
        audit: Optional[AuditRepository] = None,
        max_duration: Optional[int] = None,
    ) -> None:
        self._grants = grants or GrantRepository()
        self._records = records or RecordRepository(StorageTier.PRIMARY)
        self._audit = audit or AuditRepository()
        self._max_duration = max_duration

    @property
    def max_duration(self) -> int:
        if self._max_duration is not None:
            return self._max_duration
        return get_settings().max_grant_duration

    def grant(
        self,
        ctx: Context,
        entry_id: int,
        *,
        grantee: str,
        level: PrivilegeLevel | str,
        duration: int,
        modification_rights: bool = False,
    ) -> bool:
        max_duration = self.max_duration

        def _grant(session) -> PermissionGrant:
            record = self._records.get(entry_id, session=session)
            if record is None:
                raise RecordNotFound(entry_id)
            if record.owner != ctx.caller:
                raise AccessForbidden(
                    f"Only the owner may grant access to record '{entry_id}'.",
                    field="caller",
                )
            validate_grantee(grantee, caller=ctx.caller)
            privilege = parse_privilege_level(level)
            validate_duration(duration, max_duration=max_duration)

            stored = self._grants.upsert(
                entry_id=entry_id,
                grantee=grantee,
                privilege_level=privilege.value,
                granted_at=ctx.now,
                expires_at=ctx.now + duration,
                modification_rights=bool(modification_rights),
                granted_by=ctx.caller,
                session=session,
            )
            self._audit.record(
                action="grant.upsert",
                actor=ctx.caller,
                target_id=f"{entry_id}:{grantee}",
                logical_time=ctx.now,
                tier=StorageTier.PRIMARY.value,
                details={
                    "grantee": grantee,
                    "level": privilege.value,
                    "expires_at": stored.expires_at,
                    "modification_rights": stored.modification_rights,
                },
                session=session,
            )
            return _record_to_grant(stored)

        stored_grant = run_in_session(_grant)
        LOGGER.info(
            "Granted %s on record %s to %s until t=%s",
            stored_grant.privilege_level.value,
            entry_id,
            grantee,
            stored_grant.expires_at,
        )
        return True

    def get(self, entry_id: int, grantee: str) -> Optional[PermissionGrant]:
        def _get(session) -> Optional[PermissionGrant]:
            record = self._grants.get(entry_id=entry_id, grantee=grantee, session=session)
            if record is None:
                return None
            return _record_to_grant(record)

        return run_in_session(_get)


def _record_to_grant(record) -> PermissionGrant:
    return PermissionGrant(
        entry_id=record.entry_id,
        grantee=record.grantee,
        privilege_level=PrivilegeLevel(record.privilege_level),
        granted_at=record.granted_at,
        expires_at=record.expires_at,
        modification_rights=bool(record.modification_rights),
        granted_by=record.granted_by,
    )


__all__ = ["PermissionRegistry"]
