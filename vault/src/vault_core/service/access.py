"""Reader-side authorization over record ownership and permission grants."""

from __future__ import annotations

import logging
from typing import Optional

from vault_core.context import Context
from vault_core.domain.models import AccessDecision, PermissionGrant, PrivilegeLevel
from vault_core.errors import AccessForbidden, GrantExpired, InsufficientPrivilege, RecordNotFound, VaultError
from vault_core.validation import parse_privilege_level

from .permission_registry import PermissionRegistry
from .vault_store import VaultStore

LOGGER = logging.getLogger(__name__)


class AccessPolicy:
    """Decides whether a caller may act on a primary-tier record.

    The owner always passes. Anyone else needs a grant whose ``expires_at``
    is still ahead of ``ctx.now`` and whose level is at least the one
    required.
    """

    def __init__(self, store: VaultStore, registry: PermissionRegistry) -> None:
        self._store = store
        self._registry = registry

    def check_access(
        self,
        ctx: Context,
        entry_id: int,
        *,
        required_level: PrivilegeLevel | str = PrivilegeLevel.VIEWER,
        require_modification: bool = False,
    ) -> AccessDecision:
        required = parse_privilege_level(required_level)
        record = self._store.get(entry_id)
        if record is None:
            raise RecordNotFound(entry_id)
        if record.owner == ctx.caller:
            return AccessDecision(
                entry_id=entry_id,
                principal=ctx.caller,
                is_owner=True,
                modification_rights=True,
                reasons=["owner"],
            )

        grant = self._registry.get(entry_id, ctx.caller)
        if grant is None:
            raise AccessForbidden(f"No grant on record '{entry_id}' for '{ctx.caller}'.", field="caller")
        if not grant.is_active(ctx.now):
            raise GrantExpired(
                f"Grant on record '{entry_id}' for '{ctx.caller}' expired at t={grant.expires_at}.",
                field="expires_at",
            )
        if not grant.privilege_level.satisfies(required):
            raise InsufficientPrivilege(
                f"Grant level '{grant.privilege_level.value}' is below '{required.value}'.",
                field="privilege_level",
            )
        if require_modification and not grant.modification_rights:
            raise InsufficientPrivilege("Grant does not carry modification rights.", field="modification_rights")

        return AccessDecision(
            entry_id=entry_id,
            principal=ctx.caller,
            is_owner=False,
            privilege_level=grant.privilege_level,
            modification_rights=grant.modification_rights,
            expires_at=grant.expires_at,
            reasons=["grant"],
        )

    def has_access(
        self,
        ctx: Context,
        entry_id: int,
        *,
        required_level: PrivilegeLevel | str = PrivilegeLevel.VIEWER,
        require_modification: bool = False,
    ) -> bool:
        try:
            self.check_access(
                ctx,
                entry_id,
                required_level=required_level,
                require_modification=require_modification,
            )
        except VaultError as exc:
            LOGGER.debug("Access denied on record %s for %s: %s", entry_id, ctx.caller, exc.message)
            return False
        return True


def describe_grant_state(grant: Optional[PermissionGrant], now: int) -> Optional[str]:
    if grant is None:
        return None
    return "active" if grant.is_active(now) else "expired"


__all__ = ["AccessPolicy", "describe_grant_state"]
