"""Facade wiring the vault stores, permission registry and access policy."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional

from vault_core.context import Context
from vault_core.domain.models import AccessDecision, PermissionGrant, PrivilegeLevel, Record, StorageTier

from .access import AccessPolicy
from .permission_registry import PermissionRegistry
from .vault_store import VaultStore


class VaultFacade:
    def __init__(
        self,
        *,
        records: Optional[VaultStore] = None,
        enhanced_records: Optional[VaultStore] = None,
        permissions: Optional[PermissionRegistry] = None,
    ) -> None:
        self.records = records or VaultStore(StorageTier.PRIMARY)
        self.enhanced_records = enhanced_records or VaultStore(StorageTier.ENHANCED)
        self.permissions = permissions or PermissionRegistry()
        self.access = AccessPolicy(self.records, self.permissions)

    def store_for(self, tier: StorageTier | str) -> VaultStore:
        if StorageTier(tier) is StorageTier.ENHANCED:
            return self.enhanced_records
        return self.records

    def create_record(
        self,
        ctx: Context,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        category: str,
        tags: Iterable[str],
    ) -> int:
        return self.records.create(
            ctx,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            category=category,
            tags=tags,
        )

    def create_enhanced_record(
        self,
        ctx: Context,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        category: str,
        tags: Iterable[str],
    ) -> int:
        return self.enhanced_records.create(
            ctx,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            category=category,
            tags=tags,
        )

    def update_record(
        self,
        ctx: Context,
        entry_id: int,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        tags: Iterable[str],
    ) -> bool:
        return self.records.update(
            ctx,
            entry_id,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            tags=tags,
        )

    def update_record_lenient(
        self,
        ctx: Context,
        entry_id: int,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        tags: Iterable[str],
    ) -> bool:
        return self.records.update_lenient(
            ctx,
            entry_id,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            tags=tags,
        )

    def update_enhanced_record(
        self,
        ctx: Context,
        entry_id: int,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        tags: Iterable[str],
    ) -> bool:
        return self.enhanced_records.update(
            ctx,
            entry_id,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            tags=tags,
        )

    def grant_access(
        self,
        ctx: Context,
        entry_id: int,
        *,
        grantee: str,
        level: PrivilegeLevel | str,
        duration: int,
        modification_rights: bool = False,
    ) -> bool:
        return self.permissions.grant(
            ctx,
            entry_id,
            grantee=grantee,
            level=level,
            duration=duration,
            modification_rights=modification_rights,
        )

    def get_record(self, entry_id: int) -> Optional[Record]:
        return self.records.get(entry_id)

    def get_enhanced_record(self, entry_id: int) -> Optional[Record]:
        return self.enhanced_records.get(entry_id)

    def get_grant(self, entry_id: int, grantee: str) -> Optional[PermissionGrant]:
        return self.permissions.get(entry_id, grantee)

    def check_access(
        self,
        ctx: Context,
        entry_id: int,
        *,
        required_level: PrivilegeLevel | str = PrivilegeLevel.VIEWER,
        require_modification: bool = False,
    ) -> AccessDecision:
        return self.access.check_access(
            ctx,
            entry_id,
            required_level=required_level,
            require_modification=require_modification,
        )


@lru_cache()
def get_vault_facade() -> VaultFacade:
    return VaultFacade()


__all__ = ["VaultFacade", "get_vault_facade"]
